"""Command-line interface for the LetterIndex project."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="letterindex",
        description="Group display names into alphabetical sections by first letter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Built-in fruit catalogue as text sections
  %(prog)s

  # Group a word list and write YAML
  %(prog)s -i names.txt -f yaml -o sections.yml -v

  # Resolve the item in section 1, row 0
  %(prog)s -i names.txt --select 1,0

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "input": "names.txt",
  "items": ["Apple", "apricot"],
  "use_builtin": false,
  "skip_empty": true,
  "format": "yaml",
  "output": "sections.yml",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Sources
    parser.add_argument("-i", "--input", type=str, help="File with one item per line")
    parser.add_argument(
        "--builtin",
        dest="use_builtin",
        action="store_true",
        help="Add the built-in fruit catalogue (used by default when no source is given)",
    )
    parser.add_argument(
        "--skip-empty",
        action="store_true",
        help="Drop empty items with a warning instead of failing",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "-f",
        "--format",
        type=str,
        choices=["text", "yaml"],
        default="text",
        help="Output format",
    )
    parser.add_argument(
        "--select",
        type=str,
        metavar="SECTION,ROW",
        help="Print the item at the given zero-based section and row. Negative "
        "indices are out of range; pass them as --select=-1,0 since argparse reads "
        "a leading '-' as an option",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser
