"""
Entry points pairing every element of a sequence with a running index.

`count` walks the elements first to last, `rcount` last to first. Either one
counts up from `offset`, or down to `offset` when `reverse_index` is set.
"""

from __future__ import annotations

import typing as tp
from collections.abc import Iterable

from itercount._helpers import check_parameters, start_index
from itercount.config import IndexType
from itercount.cursors import distance, endpoints
from itercount.defaults import Step
from itercount.ranges import BorrowingRange, MaterializedRange, Owned, OwningRange
from itercount.wtyping import SizedIterable, SupportsCursor


def _count_cursors[T](
    first: SupportsCursor[T],
    last: SupportsCursor[T],
    offset: int = 0,
    reverse_index: bool = False,
    *,
    index_type: IndexType | None = None,
) -> BorrowingRange[T]:
    check_parameters(offset, reverse_index)
    length = distance(first, last) if reverse_index else 0
    start = start_index(offset, reverse_index, length)
    return BorrowingRange(first, last, start, reverse_index, index_type)


def _count_iterable[T](
    order: Step,
    iterable: Iterable[T] | Owned[Iterable[T]],
    offset: int = 0,
    reverse_index: bool = False,
    *,
    index_type: IndexType | None = None,
) -> BorrowingRange[T]:
    check_parameters(offset, reverse_index)
    match iterable:
        case Owned():
            return OwningRange(iterable, order, offset, reverse_index, index_type)
        case SizedIterable():
            first, last = endpoints(iterable, order)
            start = start_index(offset, reverse_index, len(iterable))
            return BorrowingRange(first, last, start, reverse_index, index_type)
        case Iterable():
            return MaterializedRange(iterable, order, offset, reverse_index, index_type)
        case _:  # pyright: ignore[reportUnnecessaryComparison]
            raise TypeError(f"{type(iterable).__name__!r} object is not iterable")  # pyright: ignore[reportUnreachable]


@tp.overload
def count[T](
    first: SupportsCursor[T],
    last: SupportsCursor[T],
    offset: int = 0,
    reverse_index: bool = False,
    *,
    index_type: IndexType | None = None,
) -> BorrowingRange[T]: ...
@tp.overload
def count[T](
    iterable: Iterable[T] | Owned[Iterable[T]],
    offset: int = 0,
    reverse_index: bool = False,
    *,
    index_type: IndexType | None = None,
) -> BorrowingRange[T]: ...
def count(*args: tp.Any, **kwargs: tp.Any) -> BorrowingRange[tp.Any]:  # pyright: ignore[reportAny]
    """
    Pair each element with its index, first element first.

    Accepted shapes:
        count(first, last): elements between two cursors, borrowed
        count(sequence) / count(collection): borrowed, changes to the
            elements before or during traversal are visible
        count(owned(container)): the range keeps the container alive
        count(iterator): one-shot iterables are copied into the range

    Args:
        offset: index of the first element (default: 0)
        reverse_index: count down so that the last element gets offset
        index_type: fixed width index type (default: current_index_type())

    Returns:
        BorrowingRange: iterable of Counted pairs, unpacking as (value, index)

    Raises:
        TypeError: when the arguments map onto none of the shapes above

    Example:
        >>> [tuple(pair) for pair in count([42, 43, 44])]
        [(42, 0), (43, 1), (44, 2)]
        >>> [tuple(pair) for pair in count("ABCDE", reverse_index=True)]
        [('A', 4), ('B', 3), ('C', 2), ('D', 1), ('E', 0)]
        >>> [tuple(pair) for pair in count(["L1", "L2"], 100)]
        [('L1', 100), ('L2', 101)]
    """
    match args:
        case (SupportsCursor(), SupportsCursor(), *_):
            return _count_cursors(*args, **kwargs)  # pyright: ignore[reportAny]
        case _ if "first" in kwargs or "last" in kwargs:
            return _count_cursors(*args, **kwargs)  # pyright: ignore[reportAny]
        case () if "iterable" not in kwargs:
            raise TypeError("count() missing required argument: 'iterable'")
        case _:
            return _count_iterable(Step.FORWARD, *args, **kwargs)  # pyright: ignore[reportAny]


def rcount[T](
    iterable: Iterable[T] | Owned[Iterable[T]],
    offset: int = 0,
    reverse_index: bool = False,
    *,
    index_type: IndexType | None = None,
) -> BorrowingRange[T]:
    """
    Pair each element with its index, last element first.

    Takes the same shapes as count, except a pair of cursors. Collections
    must be reversible.

    Example:
        >>> [tuple(pair) for pair in rcount("ABCDE")]
        [('E', 0), ('D', 1), ('C', 2), ('B', 3), ('A', 4)]
        >>> [tuple(pair) for pair in rcount("ABCDE", reverse_index=True)]
        [('E', 4), ('D', 3), ('C', 2), ('B', 1), ('A', 0)]
    """
    if isinstance(iterable, SupportsCursor):
        raise TypeError(
            "rcount() does not take cursors; pass reverse cursors to count() instead"
        )
    return _count_iterable(
        Step.REVERSE, iterable, offset, reverse_index, index_type=index_type
    )


if __name__ == "__main__":
    from doctest import testmod

    def show(title: str, pairs: Iterable[tp.Any]) -> None:
        print(title)
        for value, index in pairs:
            print(f"{value}: {index}")
        print()

    from itercount.cursors import begin
    from itercount.ranges import owned

    print("Range-Based for loop with counter - Example\n")

    show("fixed block", count((42, 43, 44, 45, 46, 47)))
    vec = ["A", "B", "C", "D", "E", "F", "G"]
    show("vector", count(vec))
    show("cursor pair", count(begin(vec), begin(vec) + 3))
    show("list, offset 100", count(["L1", "L2", "L3", "L4", "L5"], 100))
    show("owned vector", count(owned(["X", "Y", "Z"])))
    show("literal list", count(iter((10, 9, 8, 7, 6))))
    show("reversed vector, reversed index", rcount(vec, reverse_index=True))

    _ = testmod()
