"""Item sources for LetterIndex."""

from letterindex.data.fruits import FRUITS
from letterindex.data.sources import drop_empty_items, gather_items, load_word_list

__all__ = [
    "FRUITS",
    "drop_empty_items",
    "gather_items",
    "load_word_list",
]
