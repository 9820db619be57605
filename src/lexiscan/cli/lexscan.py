"""
lexscan - Lexical Scanner Command-Line Interface
================================================

This module implements the command-line interface for the scanner. It
reads one source file and prints one ``(<category>, <lexeme>)`` line per
token.

Usage Examples
--------------
Scan to the terminal:
    $ lexscan main.cpp

Write tokens to a file:
    $ lexscan main.cpp -o main.tokens

Recognise // comments:
    $ lexscan --comments main.cpp

Stop on an unterminated string literal:
    $ lexscan --unterminated-string error main.cpp

Verbose mode (debug log and summary on stderr):
    $ lexscan -v main.cpp
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Optional

import click

from lexiscan import __version__
from lexiscan.cli.errors import handle_cli_exception
from lexiscan.emitter import LineWriter, TokenEmitter, format_token
from lexiscan.scanner import (
    DEFAULT_ATOMIC_IDENTIFIERS,
    INVALID,
    UNTERMINATED_STRING_POLICIES,
    Scanner,
    ScannerOptions,
)
from lexiscan.source import CharSource
from lexiscan.tables import classify_literal
from lexiscan.tokens import State, Token


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        force=True,
    )


def _echo_sink(token: Token) -> None:
    click.echo(format_token(token))


class LiteralShapeSink:
    """Sink that tallies literal shapes before passing each token on."""

    def __init__(self, emitter: TokenEmitter):
        self.emitter = emitter
        self.shapes: Counter = Counter()

    def __call__(self, token: Token) -> None:
        if token.category is State.LITERAL:
            self.shapes[classify_literal(token.lexeme) or "unshaped"] += 1
        self.emitter.emit(token)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write tokens to this file instead of stdout",
)
@click.option(
    "-c", "--comments",
    is_flag=True,
    help="Recognise // comments (off by default)",
)
@click.option(
    "--unterminated-string",
    type=click.Choice(UNTERMINATED_STRING_POLICIES, case_sensitive=False),
    default=INVALID,
    show_default=True,
    help="What to do with a string literal still open at end of file",
)
@click.option(
    "-A", "--atomic",
    multiple=True,
    help="Qualified name always emitted as an identifier (can be repeated)",
)
@click.option(
    "--encoding",
    default="latin-1",
    show_default=True,
    help="Text encoding of INPUT_FILE (latin-1 reads one character per byte)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="lexscan")
def main(
    input_file: Path,
    output: Optional[Path],
    comments: bool,
    unterminated_string: str,
    atomic: tuple[str, ...],
    encoding: str,
    verbose: bool,
) -> None:
    """
    Split a source file into classified tokens.

    INPUT_FILE is the source file to scan.

    \b
    Each token is printed on its own line as:
        (identifier, main)
        (operator, ==)
        (preprocessor directive, #include <iostream>)

    \b
    Examples:
        lexscan main.cpp                  # Tokens to stdout
        lexscan main.cpp -o main.tokens   # Tokens to a file
        lexscan -c main.cpp               # Recognise // comments
        lexscan -A std::string main.cpp   # Extra atomic identifier
    """
    _configure_logging(verbose)

    options = ScannerOptions(
        atomic_identifiers=DEFAULT_ATOMIC_IDENTIFIERS | set(atomic),
        unterminated_string=unterminated_string.lower(),
        detect_comments=comments,
    )

    try:
        source = CharSource.from_file(input_file, encoding)
        scanner = Scanner(source, options=options)

        if output is None:
            emitter = TokenEmitter(_echo_sink)
            sink = LiteralShapeSink(emitter)
            scanner.scan(sink)
        else:
            with output.open("w", encoding="utf-8") as stream:
                emitter = TokenEmitter(LineWriter(stream))
                sink = LiteralShapeSink(emitter)
                scanner.scan(sink)

        if verbose:
            click.echo(f"Scanned {emitter.count} tokens from {input_file}", err=True)
            for name, count in emitter.summary():
                click.echo(f"  {name}: {count}", err=True)
            for shape, count in sorted(sink.shapes.items()):
                click.echo(f"  literal shape {shape}: {count}", err=True)
            if output is not None:
                click.echo(f"Wrote tokens to {output}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
