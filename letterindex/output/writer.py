"""Render a GroupedIndex as text or YAML."""

import sys
from typing import TextIO

from loguru import logger

from letterindex.core import GroupedIndex
from letterindex.output.yaml_helpers import write_yaml_to_stream
from letterindex.utils import expand_file_path, write_file_safely

INDENT = "  "


def format_sections(index: GroupedIndex) -> str:
    """Format the index as header lines followed by indented rows."""
    lines = []
    for section in index.sections:
        lines.append(section.key)
        lines.extend(f"{INDENT}{item}" for item in section.items)
    return "\n".join(lines) + "\n" if lines else ""


def format_selection(item: str) -> str:
    """Message printed when a row is selected."""
    return f"The selected row contains: {item}"


def _write_to_stream(index: GroupedIndex, stream: TextIO, fmt: str) -> None:
    if fmt == "yaml":
        write_yaml_to_stream(index.to_dict(), stream, "writing index")
    else:
        stream.write(format_sections(index))


def write_index(
    index: GroupedIndex, output: str | None, fmt: str = "text", verbose: bool = False
) -> None:
    """Write the index to ``output``, or stdout when ``output`` is None.

    Args:
        index: Index to write
        output: Output file path (None or "" = stdout)
        fmt: "text" or "yaml"
        verbose: Log a summary line
    """
    if fmt not in ("text", "yaml"):
        raise ValueError(f"Unknown output format: {fmt}")

    if not output:
        _write_to_stream(index, sys.stdout, fmt)
        return

    output = expand_file_path(output) or output
    write_file_safely(output, lambda f: _write_to_stream(index, f, fmt), "writing index file")

    if verbose:
        total = sum(len(section.items) for section in index.sections)
        logger.info(f"Wrote {total} items in {len(index)} sections to {output}")
