"""Command-line interface for LetterIndex."""

from letterindex.cli.parser import create_parser

__all__ = ["create_parser"]
