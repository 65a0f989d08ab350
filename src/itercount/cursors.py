"""
Element cursors: positions within a sequence.

A cursor only has to advance by one, dereference and compare equal;
see itercount.wtyping.SupportsCursor.
"""

from __future__ import annotations

import itertools as it
import typing as tp
from array import array
from collections.abc import Iterable, Iterator, Reversible, Sequence
from copy import copy
from dataclasses import dataclass

from itercount.defaults import Default, Exhausted, Step, Unavailable
from itercount.wtyping import SupportsCursor, SupportsSub

type Block[T] = Sequence[T] | array[tp.Any]


def is_block(obj: object) -> bool:
    """Whether obj is a contiguous block that can be addressed by position."""
    return isinstance(obj, (Sequence, array))


@tp.final
@dataclass(frozen=True, slots=True)
class SeqRef[T]:
    seq: Block[T]
    pos: int

    def _check(self) -> None:
        if not 0 <= self.pos < len(self.seq):
            raise IndexError(f"cursor position {self.pos} is outside the sequence")

    def get(self) -> T:
        self._check()
        return self.seq[self.pos]

    def set(self, value: T, /) -> None:
        self._check()
        self.seq[self.pos] = value  # pyright: ignore[reportIndexIssue]


@tp.final
@dataclass(frozen=True, slots=True)
class ValueRef[T]:
    value: T

    def get(self) -> T:
        return self.value

    def set(self, value: T, /) -> None:
        del value
        raise TypeError("element is read-only: the underlying cursor is not writable")


@tp.final
class SeqCursor[T]:
    """
    Cursor at a position of a sequence, moving forward or in reverse.

    Example:
        >>> letters = ["A", "B", "C"]
        >>> cursor = SeqCursor(letters, 0)
        >>> cursor.advance().get()
        'B'
        >>> (cursor + 1).get()
        'C'
        >>> SeqCursor(letters, 3) - SeqCursor(letters, 0)
        3
        >>> SeqCursor(letters, 2, Step.REVERSE).advance().get()
        'B'
    """

    __slots__ = ("_seq", "_pos", "_step")

    def __init__(self, seq: Block[T], pos: int, step: Step | int = Step.FORWARD) -> None:
        self._seq = seq
        self._pos = pos
        self._step = Step(step)

    @property
    def seq(self) -> Block[T]:
        return self._seq

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def step(self) -> Step:
        return self._step

    def advance(self) -> tp.Self:
        self._pos += self._step
        return self

    def get(self) -> T:
        return self.ref().get()

    def ref(self) -> SeqRef[T]:
        return SeqRef(self._seq, self._pos)

    def __add__(self, n: int) -> SeqCursor[T]:
        if not isinstance(n, int):
            return NotImplemented
        return SeqCursor(self._seq, self._pos + n * self._step, self._step)

    @tp.overload
    def __sub__(self, other: int) -> SeqCursor[T]: ...
    @tp.overload
    def __sub__(self, other: SeqCursor[T]) -> int: ...
    def __sub__(self, other: int | SeqCursor[T]) -> SeqCursor[T] | int:
        match other:
            case SeqCursor():
                if other._seq is not self._seq:
                    raise ValueError("cursors refer to different sequences")
                return (self._pos - other._pos) * self._step
            case int():
                return self + -other
            case _:  # pyright: ignore[reportUnnecessaryComparison]
                return NotImplemented  # pyright: ignore[reportUnreachable]

    @tp.override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeqCursor):
            return NotImplemented
        return self._seq is other._seq and self._pos == other._pos

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __copy__(self) -> SeqCursor[T]:
        return SeqCursor(self._seq, self._pos, self._step)

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pos={self._pos}, step={self._step.name})"


@tp.final
class IterCursor[T]:
    """
    Single pass cursor over any iterable.

    The underlying iterator is opened on first use, so copying a cursor
    over a re-iterable source that has not moved yet is free. Copying a
    cursor that has already moved, or one over an iterator, splits the
    iterator with itertools.tee.

    Example:
        >>> cursor = IterCursor({"x": 1, "y": 2}.items())
        >>> cursor.get()
        ('x', 1)
        >>> cursor.advance().get()
        ('y', 2)
        >>> cursor.advance() == IterCursor.end()
        True
        >>> IterCursor("abc", reverse=True).get()
        'c'
    """

    __slots__ = ("_source", "_reverse", "_iter", "_current", "_pos")

    def __init__(self, source: Iterable[T], *, reverse: bool = False) -> None:
        if reverse and not isinstance(source, Reversible):
            raise TypeError(f"{type(source).__name__!r} object is not reversible")
        self._source = source
        self._reverse = reverse
        self._iter: Iterator[T] | None = None
        self._current: T | Default = Unavailable
        self._pos = 0

    @classmethod
    def end(cls) -> IterCursor[tp.Any]:
        """Past-the-end cursor, equal to any exhausted cursor."""
        cursor: IterCursor[tp.Any] = cls(())
        cursor._current = Exhausted
        return cursor

    @property
    def pos(self) -> int:
        return self._pos

    def _fill(self) -> T | Default:
        if self._current is Unavailable:
            if self._iter is None:
                source = self._source
                self._iter = (
                    reversed(tp.cast(Reversible[T], source)) if self._reverse else iter(source)
                )
            self._current = next(self._iter, Exhausted)
        return self._current

    @property
    def exhausted(self) -> bool:
        return self._fill() is Exhausted

    def advance(self) -> tp.Self:
        if self.exhausted:
            raise IndexError("cannot advance a past-the-end cursor")
        self._current = Unavailable
        self._pos += 1
        return self

    def get(self) -> T:
        value = self._fill()
        if value is Exhausted:
            raise IndexError("cannot dereference a past-the-end cursor")
        return tp.cast(T, value)

    def ref(self) -> ValueRef[T]:
        return ValueRef(self.get())

    @tp.override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IterCursor):
            return NotImplemented
        if self.exhausted or other.exhausted:
            return self.exhausted and other.exhausted
        return (
            self._source is other._source
            and self._reverse == other._reverse
            and self._pos == other._pos
        )

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __copy__(self) -> IterCursor[T]:
        clone: IterCursor[T] = IterCursor.__new__(IterCursor)
        clone._source = self._source
        clone._reverse = self._reverse
        clone._current = self._current
        clone._pos = self._pos
        if self._iter is None and not isinstance(self._source, Iterator):
            clone._iter = None
        else:
            # an iterator source is consumed by every cursor opened on it
            if self._iter is None:
                self._iter = iter(self._source)
            self._iter, clone._iter = it.tee(self._iter)
        return clone

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pos={self._pos}, reverse={self._reverse})"


def begin[T](iterable: Iterable[T]) -> SeqCursor[T] | IterCursor[T]:
    if is_block(iterable):
        return SeqCursor(tp.cast(Block[T], iterable), 0)
    return IterCursor(iterable)


def end[T](iterable: Iterable[T]) -> SeqCursor[T] | IterCursor[T]:
    if is_block(iterable):
        block = tp.cast(Block[T], iterable)
        return SeqCursor(block, len(block))
    return IterCursor.end()


def rbegin[T](iterable: Iterable[T]) -> SeqCursor[T] | IterCursor[T]:
    if is_block(iterable):
        block = tp.cast(Block[T], iterable)
        return SeqCursor(block, len(block) - 1, Step.REVERSE)
    return IterCursor(iterable, reverse=True)


def rend[T](iterable: Iterable[T]) -> SeqCursor[T] | IterCursor[T]:
    if is_block(iterable):
        return SeqCursor(tp.cast(Block[T], iterable), -1, Step.REVERSE)
    return IterCursor.end()


def endpoints[T](
    iterable: Iterable[T], order: Step = Step.FORWARD
) -> tuple[SeqCursor[T] | IterCursor[T], SeqCursor[T] | IterCursor[T]]:
    """First and past-the-end cursors of iterable in the given element order."""
    match order:
        case Step.FORWARD:
            return begin(iterable), end(iterable)
        case Step.REVERSE:
            return rbegin(iterable), rend(iterable)
        case unknown:  # pyright: ignore[reportUnnecessaryComparison]
            raise ValueError(f"Received unknown element order: {unknown!r}")  # pyright: ignore[reportUnreachable]


def distance(first: SupportsCursor[tp.Any], last: SupportsCursor[tp.Any]) -> int:
    """
    Number of advances needed to get from first to last.

    Cursors supporting subtraction are measured directly, others are walked
    on a copy of first. The result is never negative.

    Example:
        >>> letters = list("ABCDEFG")
        >>> distance(begin(letters), begin(letters) + 3)
        3
        >>> distance(begin(letters) + 3, begin(letters))
        3
        >>> distance(IterCursor({1, 2, 3}), IterCursor.end())
        3
    """
    if isinstance(first, SupportsSub) and isinstance(last, SupportsSub):
        return abs(tp.cast(int, last - first))
    steps = 0
    cursor = copy(first)
    while cursor != last:
        _ = cursor.advance()
        steps += 1
    return steps
