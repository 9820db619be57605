"""
Scanner States and Tokens
=========================

The scanner state and the token category share one enumeration: a token
is emitted under the state that was active when its boundary was found,
with KEYWORD as the only category that is never a live scanning state.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from lexiscan.errors import SourceLocation


class State(Enum):
    """
    Scanner states.

    NONE is the resting state between tokens and is never a token
    category. KEYWORD is only produced when an identifier is finalized.
    """

    NONE = auto()
    IDENTIFIER = auto()
    KEYWORD = auto()
    LITERAL = auto()
    OPERATOR = auto()
    SEPARATOR = auto()
    COMMENT = auto()
    INVALID = auto()
    PREPROCESSOR_DIRECTIVE = auto()


# Output names for each token category; anything else renders as "unknown"
CATEGORY_NAMES: dict[State, str] = {
    State.IDENTIFIER: "identifier",
    State.KEYWORD: "keyword",
    State.LITERAL: "literal",
    State.OPERATOR: "operator",
    State.SEPARATOR: "separator",
    State.COMMENT: "comment",
    State.INVALID: "invalid",
    State.PREPROCESSOR_DIRECTIVE: "preprocessor directive",
}

UNKNOWN_CATEGORY = "unknown"


def category_name(category: State) -> str:
    """Return the output name for a token category."""
    return CATEGORY_NAMES.get(category, UNKNOWN_CATEGORY)


@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Equality and hashing only look at the category and the lexeme text,
    so tests and callers can compare tokens without caring where they
    came from.

    Attributes:
        category: The State the token was emitted under
        lexeme: The exact source text of the token
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        filename: Name of the source file
    """
    category: State
    lexeme: str
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        return f"Token({self.category.name}, {self.lexeme!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def category_name(self) -> str:
        return category_name(self.category)
