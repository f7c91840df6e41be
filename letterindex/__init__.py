"""LetterIndex - alphabetical sections for display lists.

Group display strings by first letter and serve them section by section.
"""

from letterindex.core import (
    Config,
    GroupedIndex,
    IndexOutOfRange,
    InvalidItemError,
    LetterIndexError,
    Section,
    SectionedList,
    build,
    load_config,
)
from letterindex.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "GroupedIndex",
    "IndexOutOfRange",
    "InvalidItemError",
    "LetterIndexError",
    "Section",
    "SectionedList",
    "build",
    "load_config",
    "setup_logger",
]
