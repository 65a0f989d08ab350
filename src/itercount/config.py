"""
Index type selection.

The companion index of a counting cursor behaves like a fixed width integer:
every value it takes is reduced through an IndexType, so decrementing an
unsigned index below zero wraps around exactly like the machine type would.
"""

import sys
import warnings
from dataclasses import dataclass

POINTER_BITS = sys.maxsize.bit_length() + 1


class IndexAdvisoryWarning(UserWarning):
    """Advisory note emitted when an index type is configured."""


@dataclass(frozen=True, slots=True)
class IndexType:
    """
    A fixed width integer type used for counting.

    Example:
        >>> UINT64.wrap(-1) == UINT64.max
        True
        >>> INT64.wrap(INT64.max + 1) == INT64.min
        True
        >>> IndexType("byte", bits=8, signed=False).wrap(300)
        44
    """

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value


PTRDIFF = IndexType("ptrdiff", bits=POINTER_BITS, signed=True)
SIZE = IndexType("size", bits=POINTER_BITS, signed=False)
INT64 = IndexType("int64", bits=64, signed=True)
UINT64 = IndexType("uint64", bits=64, signed=False)

_current: IndexType = PTRDIFF


def index_type_for(*, force_64bit: bool = False, signed: bool = True) -> IndexType:
    """
    Map the two index options onto one of the four index types.

    Example:
        >>> index_type_for(force_64bit=True, signed=False).name
        'uint64'
        >>> index_type_for().name
        'ptrdiff'
    """
    match force_64bit, signed:
        case True, True:
            return INT64
        case True, False:
            return UINT64
        case False, True:
            return PTRDIFF
        case _:
            return SIZE


def current_index_type() -> IndexType:
    """Index type used by count/rcount when no index_type is passed."""
    return _current


def configure(*, force_64bit: bool = False, signed: bool = True) -> IndexType:
    """
    Select the process wide default index type.

    Args:
        force_64bit: use a 64 bit index irrespective of the host pointer width
        signed: use a signed index, otherwise an unsigned one

    Returns:
        IndexType: the newly selected default

    Warns:
        IndexAdvisoryWarning: when a signed index is narrower than 64 bits,
            or when an unsigned index is selected.
    """
    global _current
    index_type = index_type_for(force_64bit=force_64bit, signed=signed)
    if index_type.signed and index_type.bits < 64:
        warnings.warn(
            f"signed {index_type.bits} bit index selected; "
            "pass force_64bit=True if sequences may exceed its range",
            IndexAdvisoryWarning,
            stacklevel=2,
        )
    if not index_type.signed:
        warnings.warn(
            f"unsigned index {index_type.name!r} selected; signed indices are "
            "recommended with reverse_index=True unless the index arithmetic "
            "has been checked for wrap-around",
            IndexAdvisoryWarning,
            stacklevel=2,
        )
    _current = index_type
    return index_type
