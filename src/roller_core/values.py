"""Value types for Roller Core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import format_number


class RollerType(Enum):
    NUM_INT = "int"
    NUM_REAL = "real"
    LIST = "list"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VNumber:
    value: int | float

    def is_int(self) -> bool:
        return isinstance(self.value, int) and not isinstance(self.value, bool)

    def as_int(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, slots=True)
class VList:
    items: tuple["Value", ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass(frozen=True, slots=True)
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


Value = Union[VNumber, VList, VText]


def type_of(value: Value) -> RollerType:
    """Classify *value* against the closed set of runtime types."""
    if isinstance(value, VNumber):
        return RollerType.NUM_INT if value.is_int() else RollerType.NUM_REAL
    if isinstance(value, VList):
        return RollerType.LIST
    if isinstance(value, VText):
        return RollerType.TEXT
    raise TypeError(f"not a Roller value: {value!r}")
