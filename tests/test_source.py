# =============================================================================
# test_source.py - Character Source Tests
# =============================================================================
# Tests for the character source: reading, peeking, position tracking and
# opening files.
# =============================================================================

import pytest

from lexiscan.errors import LexiscanError, SourceError, SourceOpenError
from lexiscan.source import CharSource


class TestCharSource:
    """Test cursor access over in-memory text."""

    def test_read_and_peek(self):
        source = CharSource("ab")
        assert source.peek() == "a"
        assert source.read() == "a"
        assert source.peek() == "b"
        assert source.read() == "b"
        assert source.at_end()

    def test_end_of_input(self):
        source = CharSource("")
        assert source.at_end()
        assert source.peek() == ""
        assert source.read() == ""

    def test_peek_does_not_advance(self):
        source = CharSource("x")
        source.peek()
        source.peek()
        assert source.column == 1
        assert source.read() == "x"

    def test_line_and_column(self):
        source = CharSource("ab\ncd")
        for _ in range(3):
            source.read()
        assert (source.line, source.column) == (2, 1)
        source.read()
        assert (source.line, source.column) == (2, 2)

    def test_line_text(self):
        source = CharSource("first\nsecond\n")
        assert source.line_text(1) == "first"
        assert source.line_text(2) == "second"
        assert source.line_text(9) == ""


class TestFromFile:
    """Test opening files."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "a.cpp"
        path.write_text("int x;")
        source = CharSource.from_file(path)
        assert source.text == "int x;"
        assert source.filename == str(path)

    def test_crlf_becomes_newline(self, tmp_path):
        path = tmp_path / "dos.cpp"
        path.write_bytes(b"#define A\r\nint b;\r\n")
        assert CharSource.from_file(path).text == "#define A\nint b;\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceOpenError, match="cannot open"):
            CharSource.from_file(tmp_path / "missing.cpp")

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "bad.cpp"
        path.write_bytes(b"int \xff;")
        with pytest.raises(SourceOpenError) as exc_info:
            CharSource.from_file(path, encoding="utf-8")
        assert exc_info.value.path == str(path)

    def test_default_reads_one_character_per_byte(self, tmp_path):
        path = tmp_path / "bytes.cpp"
        path.write_bytes(b"int \xff; \xc3\xa9")
        assert CharSource.from_file(path).text == "int \xff; \xc3\xa9"

    def test_unknown_encoding(self, tmp_path):
        path = tmp_path / "a.cpp"
        path.write_bytes(b"x")
        with pytest.raises(SourceOpenError):
            CharSource.from_file(path, encoding="no-such-codec")

    def test_other_encoding(self, tmp_path):
        path = tmp_path / "utf8.cpp"
        path.write_bytes("x = 'é';".encode("utf-8"))
        assert CharSource.from_file(path, encoding="utf-8").text == "x = 'é';"

    def test_error_hierarchy(self):
        error = SourceOpenError("x", "gone")
        assert isinstance(error, SourceError)
        assert isinstance(error, LexiscanError)
