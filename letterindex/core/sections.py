"""Section/row accessor over a GroupedIndex."""

from typing import Iterable

from letterindex.core.errors import IndexOutOfRange
from letterindex.core.grouping import build
from letterindex.core.types import GroupedIndex, Section


class SectionedList:
    """Read-only section/row view for list renderers.

    All queries are served from the prebuilt index; nothing is re-sorted.
    """

    def __init__(self, index: GroupedIndex) -> None:
        self._index = index

    @classmethod
    def from_items(cls, items: Iterable[str]) -> "SectionedList":
        """Build the index from ``items`` and wrap it."""
        return cls(build(items))

    @property
    def index(self) -> GroupedIndex:
        return self._index

    def _section(self, section: int) -> Section:
        sections = self._index.sections
        if not 0 <= section < len(sections):
            raise IndexOutOfRange("section", section, len(sections))
        return sections[section]

    def section_count(self) -> int:
        """Number of sections."""
        return len(self._index.sections)

    def row_count(self, section: int) -> int:
        """Number of rows in ``section``."""
        return len(self._section(section).items)

    def header_title(self, section: int) -> str:
        """Header title (group key) of ``section``."""
        return self._section(section).key

    def item(self, section: int, row: int) -> str:
        """Item at ``(section, row)``."""
        items = self._section(section).items
        if not 0 <= row < len(items):
            raise IndexOutOfRange("row", row, len(items))
        return items[row]

    def index_titles(self) -> list[str]:
        """All header titles, for a side index strip."""
        return self._index.keys()
