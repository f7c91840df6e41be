"""Item sources: word list files, inline config items, built-in catalogue."""

from loguru import logger

from letterindex.core import Config
from letterindex.data.fruits import FRUITS
from letterindex.utils import expand_file_path


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load display strings from a file, one per line.

    Blank lines and lines starting with ``#`` are skipped. Case is preserved.
    """
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    items = []
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    items.append(line)
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose:
        logger.info(f"Loaded {len(items)} items from {filepath}")

    return items


def drop_empty_items(items: list[str]) -> list[str]:
    """Return ``items`` without empty strings, warning once per dropped item."""
    kept = []
    for position, item in enumerate(items):
        if item:
            kept.append(item)
        else:
            logger.warning(f"Skipping empty item at position {position}")
    return kept


def gather_items(config: Config) -> list[str]:
    """Collect items from every configured source.

    Order: word list file, inline items, built-in catalogue. With no source
    configured the built-in catalogue is used.
    """
    verbose = config.verbose
    items = load_word_list(config.input, verbose)

    if config.items:
        items.extend(config.items)
        if verbose:
            logger.info(f"Added {len(config.items)} inline items from config")

    if config.use_builtin or not config.has_source:
        items.extend(FRUITS)
        if verbose:
            logger.info(f"Added {len(FRUITS)} items from the built-in fruit catalogue")

    if config.skip_empty:
        items = drop_empty_items(items)

    return items
