import enum
from typing import Literal


class Default(enum.Enum):
    """Sentinel values used as defaults."""

    Exhausted = enum.auto()
    Unavailable = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
Exhausted: Literal[Default.Exhausted] = Default.Exhausted
Unavailable: Literal[Default.Unavailable] = Default.Unavailable


class Step(int, enum.Enum):
    FORWARD = 1
    REVERSE = -1
