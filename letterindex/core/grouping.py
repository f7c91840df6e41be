"""Group display strings into sections keyed by their first letter."""

from collections import defaultdict
from typing import Iterable
import unicodedata

from loguru import logger
import regex

from letterindex.core.errors import InvalidItemError
from letterindex.core.types import GroupedIndex, Section
from letterindex.utils.logging import is_debug_enabled

_GRAPHEME = regex.compile(r"\X")


def first_character(item: str) -> str:
    """Return the first user-perceived character of ``item``.

    The whole item is NFC-normalised first, then the first extended grapheme
    cluster is taken, so canonically equivalent spellings (``"e\\u0301"`` and
    ``"\\u00e9"``, decomposed and precomposed Hangul) give the same character
    and flags or ZWJ emoji sequences stay whole.
    """
    return _GRAPHEME.match(unicodedata.normalize("NFC", item)).group()


def group_key(item: str) -> str:
    """Return the group key of ``item``: its first character, upper-cased.

    Raises:
        InvalidItemError: If ``item`` is empty or not a string
    """
    if not isinstance(item, str) or not item:
        raise InvalidItemError(item)
    return first_character(item).upper()


def sort_key(text: str) -> tuple[str, str]:
    """Case-insensitive sort key.

    Ties between strings that fold to the same text are broken by code point,
    so the result does not depend on input order.
    """
    return (text.casefold(), text)


def build(items: Iterable[str]) -> GroupedIndex:
    """Build a grouped, sorted index from ``items``.

    Args:
        items: Display strings in any order; duplicates are kept

    Returns:
        GroupedIndex with sections sorted by key and items sorted within sections

    Raises:
        InvalidItemError: If any item has no first character
    """
    by_key: dict[str, list[str]] = defaultdict(list)
    count = 0

    for position, item in enumerate(items):
        if not isinstance(item, str) or not item:
            raise InvalidItemError(item, position)
        by_key[group_key(item)].append(item)
        count += 1

    sections = tuple(
        Section(key=key, items=tuple(sorted(by_key[key], key=sort_key)))
        for key in sorted(by_key, key=sort_key)
    )

    if is_debug_enabled():
        logger.debug(f"Grouped {count} items into {len(sections)} sections")
        for section in sections:
            logger.debug(f"  {section.key}: {len(section.items)} items")
    return GroupedIndex(sections=sections)
