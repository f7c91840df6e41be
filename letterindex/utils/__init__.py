"""Utility functions for LetterIndex."""

from letterindex.utils.helpers import ensure_directory_exists, expand_file_path, write_file_safely
from letterindex.utils.logging import add_log_file_handler, is_debug_enabled, setup_logger

__all__ = [
    "add_log_file_handler",
    "ensure_directory_exists",
    "expand_file_path",
    "is_debug_enabled",
    "setup_logger",
    "write_file_safely",
]
