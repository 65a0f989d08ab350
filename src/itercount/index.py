from __future__ import annotations

import typing as tp
from collections.abc import Iterator

from itercount.wtyping import ElementRef


@tp.final
class Counted[T]:
    """
    An element paired with its index.

    `value` reads and writes through to the underlying sequence,
    `index` is read-only. Unpacks as `value, index`.

    Example:
        >>> from itercount.cursors import SeqRef
        >>> letters = ["A", "B"]
        >>> pair = Counted(SeqRef(letters, 1), 7)
        >>> value, index = pair
        >>> value, index
        ('B', 7)
        >>> pair.value = "b"
        >>> letters
        ['A', 'b']
        >>> pair == ("b", 7)
        True
    """

    __slots__ = ("_ref", "_index")

    def __init__(self, ref: ElementRef[T], index: int) -> None:
        self._ref = ref
        self._index = index

    @property
    def value(self) -> T:
        return self._ref.get()

    @value.setter
    def value(self, value: T) -> None:
        self._ref.set(value)

    @property
    def index(self) -> int:
        return self._index

    def __iter__(self) -> Iterator[tp.Any]:
        yield self.value
        yield self._index

    @tp.override
    def __eq__(self, other: object) -> bool:
        match other:
            case Counted():
                return self.value == other.value and self._index == other.index  # pyright: ignore[reportUnknownMemberType]
            case (value, index):
                return self.value == value and self._index == index
            case _:
                return NotImplemented

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r}, index={self._index})"
