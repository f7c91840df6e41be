"""Output rendering for LetterIndex."""

from letterindex.output.writer import format_sections, format_selection, write_index
from letterindex.output.yaml_helpers import write_yaml_to_stream

__all__ = [
    "format_sections",
    "format_selection",
    "write_index",
    "write_yaml_to_stream",
]
