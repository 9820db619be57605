"""
Lexiscan Command-Line Interface
===============================

This package provides the command-line tool for lexiscan:

- **lexscan**: scan a source file and print one line per token

The tool is a Click-based CLI application with consistent exit codes.
"""

__all__ = ["lexscan"]
