"""Builtin functions available to every Roller environment."""

from __future__ import annotations

import math
from typing import Callable

from .errors import ArityMismatch, InvalidOperation, TypeMismatch
from .values import RollerType, Value, VList, VNumber, VText, type_of

Builtin = Callable[[list[Value]], Value]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _expect_arity(name: str, args: list[Value], count: int) -> None:
    if len(args) != count:
        raise ArityMismatch(name, count, len(args))


def _numbers(args: list[Value]) -> list[int | float]:
    """Flatten lists one level and return the numeric payloads."""
    out: list[int | float] = []
    for arg in args:
        items = arg.items if isinstance(arg, VList) else (arg,)
        for item in items:
            if not isinstance(item, VNumber):
                raise TypeMismatch("number", type_of(item))
            out.append(item.value)
    return out


# ---------------------------------------------------------------------------
# Builtins
# ---------------------------------------------------------------------------

def roller_sum(args: list[Value]) -> Value:
    """Sum numbers and the items of number lists; ``sum()`` is 0."""
    try:
        total = sum(_numbers(args))
    except OverflowError:
        raise InvalidOperation("sum", "result is too large") from None
    if isinstance(total, float) and not math.isfinite(total):
        raise InvalidOperation("sum", "result is too large")
    return VNumber(total)


def roller_len(args: list[Value]) -> Value:
    _expect_arity("len", args, 1)
    (arg,) = args
    if isinstance(arg, (VList, VText)):
        return VNumber(len(arg.value if isinstance(arg, VText) else arg.items))
    raise TypeMismatch(RollerType.LIST, type_of(arg))


def roller_max(args: list[Value]) -> Value:
    nums = _numbers(args)
    if not nums:
        raise InvalidOperation("max", "no values given")
    return VNumber(max(nums))


def roller_min(args: list[Value]) -> Value:
    nums = _numbers(args)
    if not nums:
        raise InvalidOperation("min", "no values given")
    return VNumber(min(nums))


def roller_abs(args: list[Value]) -> Value:
    _expect_arity("abs", args, 1)
    (arg,) = args
    if not isinstance(arg, VNumber):
        raise TypeMismatch("number", type_of(arg))
    return VNumber(abs(arg.value))


def roller_sort(args: list[Value]) -> Value:
    """Sort a list of numbers in ascending order."""
    _expect_arity("sort", args, 1)
    (arg,) = args
    if not isinstance(arg, VList):
        raise TypeMismatch(RollerType.LIST, type_of(arg))
    _numbers(args)
    return VList(sorted(arg.items, key=lambda v: v.value))


BUILTINS: dict[str, Builtin] = {
    "sum": roller_sum,
    "len": roller_len,
    "max": roller_max,
    "min": roller_min,
    "abs": roller_abs,
    "sort": roller_sort,
}
