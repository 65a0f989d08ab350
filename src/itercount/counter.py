from __future__ import annotations

import typing as tp

from itercount.config import IndexType
from itercount.index import Counted
from itercount.wtyping import SupportsCursor


@tp.final
class CountingCursor[T]:
    """
    Cursor carrying a companion index.

    Advancing moves the underlying cursor by one and the index by +1,
    or by -1 when reverse_index is set. Equality only looks at the
    underlying cursors, the index never takes part in termination.

    Args:
        cursor: underlying element cursor
        index: index of the element cursor currently points to
        reverse_index: decrement instead of increment on advance
        index_type: fixed width type the index wraps in

    Example:
        >>> from itercount.config import UINT64
        >>> from itercount.cursors import SeqCursor
        >>> letters = ["A", "B", "C"]
        >>> cursor = CountingCursor(SeqCursor(letters, 0), 1, True, UINT64)
        >>> cursor.deref()
        Counted(value='A', index=1)
        >>> cursor.advance().deref()
        Counted(value='B', index=0)
        >>> cursor.advance().index == UINT64.max
        True
        >>> cursor == CountingCursor(SeqCursor(letters, 2), 0, False, UINT64)
        True
    """

    __slots__ = ("_cursor", "_index", "_reverse_index", "_index_type")

    def __init__(
        self,
        cursor: SupportsCursor[T],
        index: int,
        reverse_index: bool,
        index_type: IndexType,
    ) -> None:
        self._cursor = cursor
        self._index = index_type.wrap(index)
        self._reverse_index = reverse_index
        self._index_type = index_type

    @property
    def cursor(self) -> SupportsCursor[T]:
        return self._cursor

    @property
    def index(self) -> int:
        return self._index

    @property
    def reverse_index(self) -> bool:
        return self._reverse_index

    def advance(self) -> tp.Self:
        _ = self._cursor.advance()
        step = -1 if self._reverse_index else 1
        self._index = self._index_type.wrap(self._index + step)
        return self

    def deref(self) -> Counted[T]:
        return Counted(self._cursor.ref(), self._index)

    @tp.override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CountingCursor):
            return NotImplemented
        return self._cursor == other._cursor  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    @tp.override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(cursor={self._cursor!r}, index={self._index}, "
            f"reverse_index={self._reverse_index})"
        )
