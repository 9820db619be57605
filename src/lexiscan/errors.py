"""
Lexiscan Error Hierarchy
========================

This module defines the exception hierarchy for lexiscan.
All exceptions inherit from LexiscanError, allowing callers to catch all
scanner-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
LexiscanError (base)
├── SourceError (input-related)
│   └── SourceOpenError - input file cannot be opened or decoded
└── ScanError (scanner-related)
    └── UnterminatedStringError - string literal still open at end of input

Unrecognized characters are NOT errors: the scanner classifies them as
invalid tokens and keeps going. Only the input-open failure and, when the
caller asks for it, an unterminated string literal stop a scan.

Error messages follow this format:
    filename:line:column: error: description
    source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LexiscanError(Exception):
    """
    Base exception for all lexiscan errors.

        try:
            tokens = scan_file("main.cpp")
        except LexiscanError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Source Exceptions
# =============================================================================

class SourceError(LexiscanError):
    """Base exception for problems with the input source itself."""
    pass


class SourceOpenError(SourceError):
    """
    Input source cannot be opened or decoded.

    This is the only failure that prevents a scan from starting. It is
    reported to the caller and never retried.

    Attributes:
        path: The path that could not be opened
        reason: The underlying OS or decoding error message
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot open '{path}': {reason}")


# =============================================================================
# Scan Exceptions
# =============================================================================

class ScanError(LexiscanError):
    """
    Base exception for scanner errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Render the message as a compiler-style diagnostic.

        A scan that stops on an open string in greet.cpp reads:
            greet.cpp:2:6: error: unterminated string literal
                puts("bye);
                     ^
            hint: add closing '"' to complete the string

        The caret line is left out when no source line is known.
        """
        header = f"error: {self.message}"
        if self.location:
            header = f"{self.location}: {header}"
        lines = [header]

        if self.source_line is not None and self.location is not None:
            lines.append(f"    {self.source_line}")
            lines.append(" " * (3 + max(self.location.column, 1)) + "^")

        if self.hint:
            lines.append(f"hint: {self.hint}")

        return "\n".join(lines)


class UnterminatedStringError(ScanError):
    """
    String literal still open when the input ran out.

    Only raised when the scanner is configured with the "error" policy for
    unterminated strings; the other policies discard the text or emit it
    as an invalid token.

    Example:
        std::cout << "hello    <end of file>
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )
