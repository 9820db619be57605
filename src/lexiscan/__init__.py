"""
Lexiscan - Single-Pass Lexical Scanner
======================================

This package converts raw source text into a sequence of classified
tokens for a C/C++-like language. It is a front-end stage meant to feed
a downstream parser or analysis tool.

Main Components
---------------
- **tables**: operator, separator and keyword tables plus literal shape
  predicates
- **scanner**: the character-at-a-time state machine and its driver
- **emitter**: ordered hand-off of tokens to an output sink
- **source**: character source with one-character lookahead

Quick Start
-----------
>>> from lexiscan import tokenize, format_token
>>> for token in tokenize("std::vector<int> v;"):
...     print(format_token(token))
(identifier, std::vector)
(operator, <)
(keyword, int)
(operator, >)
(identifier, v)
(separator, ;)

Or use the command-line tool:
    $ lexscan main.cpp
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lexiscan.errors import (
    LexiscanError,
    SourceLocation,
    SourceError,
    SourceOpenError,
    ScanError,
    UnterminatedStringError,
)
from lexiscan.tokens import State, Token, category_name
from lexiscan.tables import (
    OPERATORS,
    SEPARATORS,
    KEYWORDS,
    is_operator,
    is_separator,
    is_keyword,
    is_integer,
    is_floating_point,
    is_character,
    is_string,
    is_bool,
    is_literal,
    classify_literal,
)
from lexiscan.source import CharSource
from lexiscan.emitter import (
    TokenEmitter,
    LineWriter,
    TokenCollector,
    format_token,
    resolve_identifier,
)
from lexiscan.scanner import (
    Scanner,
    ScannerOptions,
    ScanState,
    Transition,
    step,
    flush,
    tokenize,
    scan_file,
)

__all__ = [
    "__version__",
    # Errors
    "LexiscanError",
    "SourceLocation",
    "SourceError",
    "SourceOpenError",
    "ScanError",
    "UnterminatedStringError",
    # Tokens
    "State",
    "Token",
    "category_name",
    # Tables
    "OPERATORS",
    "SEPARATORS",
    "KEYWORDS",
    "is_operator",
    "is_separator",
    "is_keyword",
    "is_integer",
    "is_floating_point",
    "is_character",
    "is_string",
    "is_bool",
    "is_literal",
    "classify_literal",
    # Source
    "CharSource",
    # Emitter
    "TokenEmitter",
    "LineWriter",
    "TokenCollector",
    "format_token",
    "resolve_identifier",
    # Scanner
    "Scanner",
    "ScannerOptions",
    "ScanState",
    "Transition",
    "step",
    "flush",
    "tokenize",
    "scan_file",
]
