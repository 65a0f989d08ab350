import typing as tp
from collections.abc import Iterable, Sized


class ElementRef[T](tp.Protocol):
    def get(self) -> T: ...
    def set(self, value: T, /) -> None: ...


@tp.runtime_checkable
class SupportsCursor[T](tp.Protocol):
    """A position in a sequence: advance by one, dereference, compare."""

    def advance(self) -> tp.Self: ...
    def get(self) -> T: ...
    def ref(self) -> ElementRef[T]: ...


@tp.runtime_checkable
class SupportsSub(tp.Protocol):
    def __sub__(self, other: tp.Any, /) -> tp.Any: ...  # pyright: ignore[reportAny]  # noqa: ANN401


@tp.runtime_checkable
class SizedIterable[T](Sized, Iterable[T], tp.Protocol):
    """An iterable that also knows its length."""
