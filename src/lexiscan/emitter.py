"""
Token Emitter
=============

Hands completed tokens to the output collaborator, in the order the
scanner completed them, with no buffering or reordering. The only
classification done here is the identifier/keyword split, which the
scanner calls when an identifier buffer is finalized.

Output Format
-------------
Each token renders as one line:

    (identifier, main)
    (separator, ()
    (preprocessor directive, #include <iostream>)
"""

from collections import Counter
from typing import Callable, Iterable, TextIO

from lexiscan.tables import is_keyword
from lexiscan.tokens import State, Token, category_name

TokenSink = Callable[[Token], None]


def resolve_identifier(lexeme: str, atomic_identifiers: Iterable[str] = ()) -> State:
    """
    Decide whether a finished identifier buffer is a keyword.

    Names on the atomic-identifier allow-list are always identifiers.
    """
    if lexeme in atomic_identifiers or not is_keyword(lexeme):
        return State.IDENTIFIER
    return State.KEYWORD


def format_token(token: Token) -> str:
    """Render a token as ``(<category-name>, <lexeme>)``."""
    return f"({category_name(token.category)}, {token.lexeme})"


# =============================================================================
# Sinks
# =============================================================================

class LineWriter:
    """Sink that writes one formatted line per token to a text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def __call__(self, token: Token) -> None:
        self.stream.write(format_token(token) + "\n")


class TokenCollector:
    """Sink that keeps every token in a list."""

    def __init__(self):
        self.tokens: list[Token] = []

    def __call__(self, token: Token) -> None:
        self.tokens.append(token)


# =============================================================================
# Emitter
# =============================================================================

class TokenEmitter:
    """
    Ordered pass-through from the scanner to a sink.

    Also keeps per-category counts for summaries.

    Usage:
        emitter = TokenEmitter(LineWriter(sys.stdout))
        Scanner(source).scan(emitter)
        print(emitter.count)
    """

    def __init__(self, sink: TokenSink):
        self.sink = sink
        self.counts: Counter = Counter()

    def emit(self, token: Token) -> None:
        self.counts[token.category] += 1
        self.sink(token)

    __call__ = emit

    @property
    def count(self) -> int:
        """Total number of tokens emitted."""
        return sum(self.counts.values())

    def summary(self) -> list[tuple[str, int]]:
        """Return (category name, count) pairs in category order."""
        return [
            (category_name(category), self.counts[category])
            for category in State
            if self.counts[category]
        ]
