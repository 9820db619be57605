"""
Scanner (Tokenizer)
===================

This module implements the single-pass scanning state machine that turns
a character stream into classified tokens.

The machine is split in two:

- ``step()`` is a pure transition function. Given the current scan state,
  one character and one character of lookahead, it returns the next scan
  state, the token completed by this character (if any), whether the
  character must be processed again from the resting state, and how many
  lookahead characters it used up.
- ``Scanner`` owns the only cursor over the input. It feeds characters to
  ``step()``, honours the reprocess and lookahead results, attaches source
  locations and flushes the last buffer at end of input.

States
------
| State                  | Entered on                | Keeps going while       |
|------------------------|---------------------------|-------------------------|
| IDENTIFIER             | letter or _               | letter, digit, _, ``::``|
| LITERAL                | digit or "                | digit, . or '           |
| OPERATOR / SEPARATOR   | one-char spelling         | buffer+char is a spelling|
| PREPROCESSOR_DIRECTIVE | #                         | not newline             |
| COMMENT                | // (opt-in)               | not newline             |
| INVALID                | anything else             | (emitted on next char)  |

A double quote switches on the string sub-mode, which swallows every
character up to and including the closing quote regardless of state.

Example Usage
-------------
>>> from lexiscan.scanner import tokenize
>>> for token in tokenize("int x = 42;"):
...     print(token)
Token(KEYWORD, 'int', 1:1)
Token(IDENTIFIER, 'x', 1:5)
Token(OPERATOR, '=', 1:7)
Token(LITERAL, '42', 1:9)
Token(SEPARATOR, ';', 1:11)
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from lexiscan.emitter import TokenCollector, resolve_identifier
from lexiscan.errors import SourceLocation, UnterminatedStringError
from lexiscan.source import CharSource
from lexiscan.tables import (
    DIGITS,
    IDENT_CHARS,
    IDENT_START,
    LITERAL_CHARS,
    WHITESPACE,
    is_operator,
    is_separator,
)
from lexiscan.tokens import State, Token

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_ATOMIC_IDENTIFIERS = frozenset({"std::cout", "std::endl"})

# What to do with a string literal still open at end of input
DISCARD = "discard"
INVALID = "invalid"
ERROR = "error"
UNTERMINATED_STRING_POLICIES = (DISCARD, INVALID, ERROR)


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        atomic_identifiers: Qualified names always emitted as identifiers,
                            never reclassified as keywords.
        unterminated_string: Policy for a string literal still open at end
                             of input: "discard" drops it, "invalid" emits
                             it as an invalid token, "error" raises
                             UnterminatedStringError.
        detect_comments: Treat ``//`` as the start of a comment running to
                         the end of the line. Off by default, in which case
                         ``//`` scans as two operators.
    """
    atomic_identifiers: frozenset[str] = DEFAULT_ATOMIC_IDENTIFIERS
    unterminated_string: str = INVALID
    detect_comments: bool = False

    def __post_init__(self):
        self.atomic_identifiers = frozenset(self.atomic_identifiers)
        if self.unterminated_string not in UNTERMINATED_STRING_POLICIES:
            raise ValueError(
                f"unknown unterminated string policy {self.unterminated_string!r}; "
                f"expected one of {', '.join(UNTERMINATED_STRING_POLICIES)}"
            )


# =============================================================================
# Transition Function
# =============================================================================

@dataclass(frozen=True)
class ScanState:
    """
    Immutable snapshot of the machine between characters.

    Attributes:
        state: The active State (NONE between tokens)
        buffer: Characters accumulated for the current token
        in_string: True inside an unterminated double-quoted literal
    """
    state: State = State.NONE
    buffer: str = ""
    in_string: bool = False


RESTING = ScanState()

# (category, lexeme) of a completed token
Emission = tuple[State, str]


@dataclass(frozen=True)
class Transition:
    """
    Result of feeding one character to the machine.

    Attributes:
        next: Scan state after this character
        emitted: Token completed by this character, if any
        reprocess: The character was not consumed and must be fed again
        lookahead_consumed: Number of lookahead characters used up (0 or 1)
    """
    next: ScanState
    emitted: Optional[Emission] = None
    reprocess: bool = False
    lookahead_consumed: int = 0


def _append(current: ScanState, char: str) -> Transition:
    return Transition(replace(current, buffer=current.buffer + char))


def _enter(state: State, char: str, in_string: bool = False) -> Transition:
    return Transition(ScanState(state, char, in_string))


def _boundary(category: State, lexeme: str, reprocess: bool) -> Transition:
    return Transition(RESTING, (category, lexeme), reprocess=reprocess)


def _step_string(current, char, lookahead, options):
    buffer = current.buffer + char
    if char == '"':
        return _boundary(State.LITERAL, buffer, reprocess=False)
    return Transition(replace(current, buffer=buffer))


def _step_none(current, char, lookahead, options):
    if char in WHITESPACE:
        return Transition(current)
    if char == "#":
        return _enter(State.PREPROCESSOR_DIRECTIVE, char)
    if char in IDENT_START:
        return _enter(State.IDENTIFIER, char)
    if char in DIGITS:
        return _enter(State.LITERAL, char)
    if char == '"':
        return _enter(State.LITERAL, char, in_string=True)
    if options.detect_comments and char == "/" and lookahead == "/":
        return _enter(State.COMMENT, char)
    # Operator is tested first, so "." becomes an operator
    if is_operator(char):
        return _enter(State.OPERATOR, char)
    if is_separator(char):
        return _enter(State.SEPARATOR, char)
    return _enter(State.INVALID, char)


def _step_line(current, char, lookahead, options):
    """Preprocessor directives and comments both run to end of line."""
    if char == "\n":
        return _boundary(current.state, current.buffer, reprocess=False)
    return _append(current, char)


def _step_identifier(current, char, lookahead, options):
    if char in IDENT_CHARS:
        return _append(current, char)

    # Scope qualifier: swallow both colons and keep the identifier going
    if char == ":" and lookahead == ":":
        return Transition(
            replace(current, buffer=current.buffer + "::"),
            lookahead_consumed=1,
        )

    category = resolve_identifier(current.buffer, options.atomic_identifiers)
    return _boundary(category, current.buffer, reprocess=True)


def _step_literal(current, char, lookahead, options):
    if char in LITERAL_CHARS:
        return _append(current, char)
    return _boundary(State.LITERAL, current.buffer, reprocess=True)


def _step_symbol(current, char, lookahead, options):
    """Greedy extension shared by OPERATOR and SEPARATOR."""
    extended = current.buffer + char
    if is_operator(extended) or is_separator(extended):
        return _append(current, char)
    return _boundary(current.state, current.buffer, reprocess=True)


def _step_invalid(current, char, lookahead, options):
    # The invalid buffer is emitted one character late, and that character
    # starts over from the resting state.
    return _boundary(State.INVALID, current.buffer, reprocess=True)


StepHandler = Callable[[ScanState, str, str, ScannerOptions], Transition]

_HANDLERS: dict[State, StepHandler] = {
    State.NONE: _step_none,
    State.PREPROCESSOR_DIRECTIVE: _step_line,
    State.IDENTIFIER: _step_identifier,
    State.LITERAL: _step_literal,
    State.OPERATOR: _step_symbol,
    State.SEPARATOR: _step_symbol,
    State.COMMENT: _step_line,
    State.INVALID: _step_invalid,
}


def step(
    current: ScanState,
    char: str,
    lookahead: str = "",
    options: Optional[ScannerOptions] = None,
) -> Transition:
    """
    Feed one character to the machine.

    Args:
        current: Scan state before the character
        char: The character being processed
        lookahead: The following character, or "" at end of input
        options: Scanner configuration (defaults if None)

    Returns:
        The Transition describing the new state and any completed token

    Raises:
        ValueError: If current.state is KEYWORD, which is never live
    """
    if options is None:
        options = ScannerOptions()

    # The string sub-mode overrides every state
    if current.in_string:
        return _step_string(current, char, lookahead, options)

    handler = _HANDLERS.get(current.state)
    if handler is None:
        raise ValueError(f"{current.state.name} is not a scanning state")
    return handler(current, char, lookahead, options)


def flush(current: ScanState, options: Optional[ScannerOptions] = None) -> Optional[Emission]:
    """
    Return the token left in the buffer at end of input, if any.

    Identifiers are resolved against the keyword table exactly as on a
    live boundary. Open string literals are not handled here; the
    Scanner applies its unterminated-string policy to them.
    """
    if options is None:
        options = ScannerOptions()

    if not current.buffer or current.state is State.NONE:
        return None
    if current.state is State.IDENTIFIER:
        return resolve_identifier(current.buffer, options.atomic_identifiers), current.buffer
    return current.state, current.buffer


# =============================================================================
# Scanner Driver
# =============================================================================

class Scanner:
    """
    Drives the transition function over a character source.

    Usage:
        scanner = Scanner(source_text, "main.cpp")
        tokens = list(scanner.tokenize())

    Attributes:
        source: The CharSource being scanned
        options: Scanner configuration
    """

    def __init__(
        self,
        source: Union[str, CharSource],
        filename: str = "<input>",
        options: Optional[ScannerOptions] = None,
    ):
        if isinstance(source, str):
            source = CharSource(source, filename)
        self.source = source
        self.options = options or ScannerOptions()

    @property
    def filename(self) -> str:
        return self.source.filename

    def _make_token(self, emission: Emission, start: tuple[int, int]) -> Token:
        category, lexeme = emission
        return Token(category, lexeme, start[0], start[1], self.filename)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source, in order.

        Raises:
            UnterminatedStringError: Only with the "error" policy, when a
                string literal is still open at end of input
        """
        source = self.source
        current = RESTING
        char = ""
        char_pos = (source.line, source.column)
        token_start: Optional[tuple[int, int]] = None

        while True:
            if not char:
                if source.at_end():
                    break
                char_pos = (source.line, source.column)
                char = source.read()

            transition = step(current, char, source.peek(), self.options)

            if transition.lookahead_consumed:
                source.read()

            if transition.emitted is not None:
                yield self._make_token(transition.emitted, token_start)
                token_start = None

            if token_start is None and transition.next.buffer:
                token_start = char_pos
                if transition.next.state is State.INVALID:
                    logger.debug(
                        f"{self.filename}:{char_pos[0]}:{char_pos[1]}: "
                        f"invalid character {char!r}"
                    )

            current = transition.next
            if not transition.reprocess:
                char = ""

        if current.in_string:
            token = self._unterminated_string(current, token_start)
            if token is not None:
                yield token
            return

        emission = flush(current, self.options)
        if emission is not None:
            yield self._make_token(emission, token_start)

    def _unterminated_string(
        self,
        current: ScanState,
        start: tuple[int, int],
    ) -> Optional[Token]:
        """Apply the unterminated-string policy at end of input."""
        policy = self.options.unterminated_string
        where = f"{self.filename}:{start[0]}:{start[1]}"

        if policy == ERROR:
            location = SourceLocation(self.filename, start[0], start[1])
            raise UnterminatedStringError(location, self.source.line_text(start[0]))

        if policy == DISCARD:
            logger.warning(f"{where}: discarding unterminated string literal")
            return None

        logger.warning(f"{where}: unterminated string literal emitted as invalid")
        return self._make_token((State.INVALID, current.buffer), start)

    def scan(self, emitter: Callable[[Token], None]) -> int:
        """
        Run the whole scan, handing each token to emitter.

        Returns:
            The number of tokens emitted
        """
        count = 0
        for token in self.tokenize():
            emitter(token)
            count += 1

        logger.debug(f"Scanned {count} tokens from {self.filename}")
        return count


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    text: str,
    filename: str = "<input>",
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """Scan a string and return its tokens as a list."""
    collector = TokenCollector()
    Scanner(text, filename, options).scan(collector)
    return collector.tokens


def scan_file(
    path: Union[str, Path],
    options: Optional[ScannerOptions] = None,
    encoding: str = "latin-1",
) -> list[Token]:
    """
    Scan a file and return its tokens as a list.

    Raises:
        SourceOpenError: If the file cannot be opened or decoded
    """
    source = CharSource.from_file(path, encoding)
    collector = TokenCollector()
    Scanner(source, options=options).scan(collector)
    return collector.tokens
