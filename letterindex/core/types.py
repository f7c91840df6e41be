"""Type definitions for LetterIndex."""

from pydantic import BaseModel, Field


class Section(BaseModel):
    """One group of the index: a key and its sorted items."""

    key: str = Field(min_length=1, description="Upper-cased first character")
    items: tuple[str, ...] = Field(min_length=1, description="Items sorted case-insensitively")

    model_config = {"frozen": True}


class GroupedIndex(BaseModel):
    """Immutable sequence of sections ordered by key."""

    sections: tuple[Section, ...] = ()

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.sections)

    def keys(self) -> list[str]:
        """Return section keys in display order."""
        return [section.key for section in self.sections]

    def all_items(self) -> list[str]:
        """Return every item, section by section."""
        return [item for section in self.sections for item in section.items]

    def to_dict(self) -> dict[str, list[str]]:
        """Return an insertion-ordered ``key -> items`` mapping."""
        return {section.key: list(section.items) for section in self.sections}
