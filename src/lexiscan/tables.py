"""
Classification Tables
=====================

Process-wide constant tables used by the scanner to classify lexemes.
Every test in this module is a pure exact-match lookup: multi-character
operators and separators are recognised by the scanner extending its
buffer one character at a time and re-testing membership, not by any
longest-match search here.

Character classes are ASCII only. The scanner works on single-byte
characters, so anything outside these sets falls through to "invalid".
"""

import string
from typing import Optional


# =============================================================================
# Character Classes
# =============================================================================

# Matches the C locale isspace() set
WHITESPACE = frozenset(" \t\n\v\f\r")

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)

# Characters that can start an identifier
IDENT_START = LETTERS | {"_"}

# Characters that can continue an identifier
IDENT_CHARS = LETTERS | DIGITS | {"_"}

# Characters that keep a numeric literal going
LITERAL_CHARS = DIGITS | {".", "'"}


# =============================================================================
# Lexeme Tables
# =============================================================================

OPERATORS: frozenset[str] = frozenset({
    "+", "-", "*", "/", "%",            # Arithmetic
    "++", "--",                         # Increment / decrement
    "=", "+=", "-=", "*=", "/=", "%=",  # Assignment
    "==", "!=", ">", "<", ">=", "<=",   # Comparison
    "&&", "||", "!",                    # Logical
    "&", "|", "^", "~", "<<", ">>",     # Bitwise
    "?:",                               # Ternary marker
    "::", ".", "->",                    # Member / scope access
})

SEPARATORS: frozenset[str] = frozenset({
    ";", ",", ":",
    "(", ")", "[", "]", "{", "}",
    ".", "->", "::",
    "#",
})

KEYWORDS: frozenset[str] = frozenset({
    # Control flow
    "if", "else", "while", "do", "for", "switch", "case", "default",
    # Primitive types
    "int", "char", "double", "float", "long", "short", "bool", "void",
    # User-defined types
    "class", "struct", "union", "enum", "typedef", "template",
    # Access specifiers
    "public", "private", "protected", "friend",
    # Qualifiers and storage classes
    "const", "static", "volatile", "extern",
    # Jumps
    "return", "break", "continue", "goto",
    # Exceptions
    "try", "catch", "throw", "finally",
    # Operators and size specifiers
    "new", "delete", "this", "operator", "sizeof", "typeof", "constexpr",
    # Other
    "auto", "register", "using", "namespace", "include",
})


# =============================================================================
# Membership Tests
# =============================================================================

def is_operator(text: str) -> bool:
    """Return True if text is exactly one of the operator spellings."""
    return text in OPERATORS


def is_separator(text: str) -> bool:
    """Return True if text is exactly one of the separator spellings."""
    return text in SEPARATORS


def is_keyword(text: str) -> bool:
    """Return True if text is a reserved word."""
    return text in KEYWORDS


# =============================================================================
# Literal Shape Predicates
# =============================================================================

def _all_digits(text: str) -> bool:
    return bool(text) and all(char in DIGITS for char in text)


def is_integer(text: str) -> bool:
    """
    Return True if text is a decimal integer with an optional sign.

    >>> is_integer("-42")
    True
    >>> is_integer("+")
    False
    """
    if not text:
        return False
    if text[0] in "+-":
        text = text[1:]
    return _all_digits(text)


def is_floating_point(text: str) -> bool:
    """
    Return True if text is ``<integer>.<digits>``.

    The dot may be neither the first nor the last character, so ``3.``
    and ``.5`` are rejected here even though the live scanner accepts
    both character runs as literal content.
    """
    dot = text.find(".")
    if dot <= 0 or dot == len(text) - 1:
        return False
    return is_integer(text[:dot]) and _all_digits(text[dot + 1:])


def is_character(text: str) -> bool:
    """Return True for a three-character single-quoted literal like 'a'."""
    return len(text) == 3 and text[0] == "'" and text[2] == "'"


def is_string(text: str) -> bool:
    """Return True for a double-quoted literal, including the empty ``""``."""
    return len(text) >= 2 and text[0] == '"' and text[-1] == '"'


def is_bool(text: str) -> bool:
    return text in ("true", "false")


def is_literal(text: str) -> bool:
    """
    Return True if text has any literal shape.

    The scanner does not call this: literals are built incrementally by
    character class. It is provided for callers that want to validate a
    finished lexeme.
    """
    return (
        is_integer(text)
        or is_floating_point(text)
        or is_character(text)
        or is_string(text)
        or is_bool(text)
    )


# Checked in order; the first matching shape wins
_LITERAL_SHAPES = (
    ("integer", is_integer),
    ("floating-point", is_floating_point),
    ("character", is_character),
    ("string", is_string),
    ("bool", is_bool),
)


def classify_literal(text: str) -> Optional[str]:
    """
    Name the literal shape of text, or None if it has none.

    >>> classify_literal("3.14")
    'floating-point'
    >>> classify_literal("3.") is None
    True
    """
    for name, predicate in _LITERAL_SHAPES:
        if predicate(text):
            return name
    return None
