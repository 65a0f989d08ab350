"""
Ranges handing out counting cursors.

BorrowingRange only holds endpoints into a sequence owned by the caller.
OwningRange takes the sequence over first and derives its endpoints from
the stored copy, so the endpoints stay valid for as long as the range lives.
MaterializedRange does the same for one-shot iterables by copying their
elements into a list.
"""

from __future__ import annotations

import typing as tp
from collections.abc import Collection, Iterable, Iterator
from copy import copy

from itercount._helpers import start_index
from itercount.config import IndexType, current_index_type
from itercount.counter import CountingCursor
from itercount.cursors import endpoints
from itercount.defaults import Default, Step, Unavailable
from itercount.index import Counted
from itercount.wtyping import SupportsCursor


@tp.final
class Owned[C]:
    """
    Marks a container whose ownership is transferred to a range.

    Example:
        >>> box = Owned([1, 2])
        >>> box.release()
        [1, 2]
        >>> box.released
        True
        >>> box.release()
        Traceback (most recent call last):
            ...
        ValueError: ownership was already transferred
    """

    __slots__ = ("_value",)

    def __init__(self, value: C) -> None:
        self._value: C | Default = value

    @property
    def released(self) -> bool:
        return self._value is Unavailable

    def release(self) -> C:
        value = self._value
        if value is Unavailable:
            raise ValueError("ownership was already transferred")
        self._value = Unavailable
        return tp.cast(C, value)

    @tp.override
    def __repr__(self) -> str:
        state = "released" if self.released else repr(self._value)
        return f"{self.__class__.__name__}({state})"


def owned[C](container: C) -> Owned[C]:
    """Hand container over to count/rcount, which will keep it alive."""
    return Owned(container)


class BorrowingRange[T](Iterable[Counted[T]]):
    """
    Range over a sequence owned by someone else.

    Args:
        first: cursor at the first element
        last: past-the-end cursor
        start: index of the first element
        reverse_index: count down instead of up
        index_type: fixed width type of the index (default: current_index_type())
    """

    __slots__ = ("_first", "_last", "_start", "_reverse_index", "_index_type")

    def __init__(
        self,
        first: SupportsCursor[T],
        last: SupportsCursor[T],
        start: int = 0,
        reverse_index: bool = False,
        index_type: IndexType | None = None,
    ) -> None:
        self._first = first
        self._last = last
        self._start = start
        self._reverse_index = reverse_index
        self._index_type = current_index_type() if index_type is None else index_type

    @property
    def index_type(self) -> IndexType:
        return self._index_type

    def begin(self) -> CountingCursor[T]:
        return CountingCursor(
            copy(self._first), self._start, self._reverse_index, self._index_type
        )

    def end(self) -> CountingCursor[T]:
        return CountingCursor(
            copy(self._last), self._start, self._reverse_index, self._index_type
        )

    @tp.override
    def __iter__(self) -> Iterator[Counted[T]]:
        cursor, last = self.begin(), self.end()
        while cursor != last:
            yield cursor.deref()
            _ = cursor.advance()

    @tp.override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(first={self._first!r}, last={self._last!r}, "
            f"start={self._start}, reverse_index={self._reverse_index})"
        )


class OwningRange[T](BorrowingRange[T]):
    """
    Range that keeps its sequence alive.

    The container is released from `source` into the range before any
    endpoint is derived, and endpoints always refer to the stored container.
    A one-shot iterable handed over this way is copied into a list.

    Args:
        source: container whose ownership is transferred
        order: element order, forward or reverse
        offset: base value of the index
        reverse_index: count down instead of up
        index_type: fixed width type of the index (default: current_index_type())

    Example:
        >>> letters = OwningRange(Owned(["A", "B", "C"]), Step.REVERSE, 10)
        >>> [tuple(pair) for pair in letters]
        [('C', 10), ('B', 11), ('A', 12)]
    """

    __slots__ = ("_storage",)

    def __init__(
        self,
        source: Owned[Iterable[T]],
        order: Step = Step.FORWARD,
        offset: int = 0,
        reverse_index: bool = False,
        index_type: IndexType | None = None,
    ) -> None:
        storage = source.release()
        self._storage: Collection[T] = (
            storage if isinstance(storage, Collection) else list(storage)
        )
        self._settle(order, offset, reverse_index, index_type)

    def _settle(
        self,
        order: Step,
        offset: int,
        reverse_index: bool,
        index_type: IndexType | None,
    ) -> None:
        first, last = endpoints(self._storage, order)
        start = start_index(offset, reverse_index, len(self._storage))
        BorrowingRange.__init__(self, first, last, start, reverse_index, index_type)

    @property
    def storage(self) -> Collection[T]:
        return self._storage


@tp.final
class MaterializedRange[T](OwningRange[T]):
    """
    Range over the elements of a one-shot iterable, copied into a list.

    Example:
        >>> squares = MaterializedRange(n * n for n in range(1, 4))
        >>> [tuple(pair) for pair in squares]
        [(1, 0), (4, 1), (9, 2)]
        >>> squares.storage
        [1, 4, 9]
    """

    __slots__ = ()

    def __init__(
        self,
        iterable: Iterable[T],
        order: Step = Step.FORWARD,
        offset: int = 0,
        reverse_index: bool = False,
        index_type: IndexType | None = None,
    ) -> None:
        self._storage = list(iterable)
        self._settle(order, offset, reverse_index, index_type)
