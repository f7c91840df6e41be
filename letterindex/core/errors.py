"""Error types raised by LetterIndex."""


class LetterIndexError(Exception):
    """Base class for all LetterIndex errors."""


class InvalidItemError(LetterIndexError, ValueError):
    """An input item has no first character to group on."""

    def __init__(self, item: object, position: int | None = None) -> None:
        self.item = item
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Item{where} has no first character to group on: {item!r}")


class IndexOutOfRange(LetterIndexError, IndexError):
    """A section or row index falls outside the current bounds."""

    def __init__(self, kind: str, index: int, size: int) -> None:
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} index {index} out of range [0, {size})")
