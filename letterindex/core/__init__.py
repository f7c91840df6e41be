"""Core domain logic for LetterIndex."""

from .config import Config, load_config
from .errors import IndexOutOfRange, InvalidItemError, LetterIndexError
from .grouping import build, first_character, group_key, sort_key
from .sections import SectionedList
from .types import GroupedIndex, Section

__all__ = [
    "Config",
    "GroupedIndex",
    "IndexOutOfRange",
    "InvalidItemError",
    "LetterIndexError",
    "Section",
    "SectionedList",
    "build",
    "first_character",
    "group_key",
    "load_config",
    "sort_key",
]
