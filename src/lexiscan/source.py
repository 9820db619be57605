"""
Character Source
================

The input collaborator for the scanner: a sequential source of characters
with end-of-stream detection and a one-character peek. The scanner's
drive loop owns the only cursor; nothing else advances it.

Example Usage
-------------
>>> source = CharSource("a::b")
>>> source.read(), source.peek(), source.read()
('a', ':', ':')
"""

import logging
from pathlib import Path
from typing import Union

from lexiscan.errors import SourceOpenError

logger = logging.getLogger(__name__)


class CharSource:
    """
    Sequential character reader over in-memory text.

    Tracks the 1-indexed line and column of the next unread character so
    tokens and errors can carry a location.

    Attributes:
        text: The full source text
        filename: Name used in locations ("<input>" for string input)
    """

    def __init__(self, text: str, filename: str = "<input>"):
        self.text = text
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._column = 1

        # Offset of the first character of the current line
        self._line_start_pos = 0

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        encoding: str = "latin-1",
    ) -> "CharSource":
        """
        Read a whole file into a new source.

        The file is read in text mode, so CRLF line endings arrive as a
        single newline. The default latin-1 decoding maps every byte to
        exactly one character, so no input fails to decode.

        Raises:
            SourceOpenError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise SourceOpenError(str(path), str(e)) from e

        logger.debug(f"Read {len(text)} characters from {path}")
        return cls(text, str(path))

    # =========================================================================
    # Cursor Access
    # =========================================================================

    def at_end(self) -> bool:
        return self._pos >= len(self.text)

    def peek(self) -> str:
        """Return the next character without consuming it, or "" at end."""
        if self.at_end():
            return ""
        return self.text[self._pos]

    def read(self) -> str:
        """Consume and return the next character, or "" at end."""
        if self.at_end():
            return ""

        char = self.text[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def line_text(self, line: int) -> str:
        """Return the text of a 1-indexed line, without its newline."""
        lines = self.text.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return ""
