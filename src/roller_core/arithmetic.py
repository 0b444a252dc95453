"""Value-level arithmetic for Roller Core.

A ``VList`` of numbers used as an arithmetic operand stands for the sum of
its items, so a rolled dice pool combines with plain numbers (``2d6+3``).
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from .errors import DivisionByZero, InvalidOperation, TypeMismatch
from .syntax_tree import InfixOp
from .values import Value, VList, VNumber, VText, type_of

# Integer powers whose result would need more bits than this are refused
MAX_INT_BITS = 1 << 20

NUMBER = "number"

Number = int | float


def _numeric(value: Value, op: InfixOp) -> Number:
    """Reduce *value* to a Python number or raise ``TypeMismatch``."""
    if isinstance(value, VNumber):
        return value.value
    if isinstance(value, VList):
        items = []
        for item in value.items:
            if not isinstance(item, VNumber):
                raise TypeMismatch(NUMBER, type_of(item))
            items.append(item.value)
        return _compute(op, sum, items)
    raise TypeMismatch(NUMBER, type_of(value))


def _compute(op: InfixOp, fun: Callable[..., Number], *args) -> Number:
    """Run *fun* and keep the result a finite real number."""
    try:
        result = fun(*args)
    except ZeroDivisionError:
        raise DivisionByZero(op) from None
    except OverflowError:
        raise InvalidOperation(op, "result is too large") from None
    if isinstance(result, complex):
        raise InvalidOperation(op, "result is not a real number")
    if isinstance(result, float) and not math.isfinite(result):
        raise InvalidOperation(op, "result is too large")
    return result


def _binary(op: InfixOp, fun: Callable[[Number, Number], Number], lhs: Value, rhs: Value) -> VNumber:
    return VNumber(_compute(op, fun, _numeric(lhs, op), _numeric(rhs, op)))


def add(lhs: Value, rhs: Value) -> Value:
    if isinstance(lhs, VList) and isinstance(rhs, VList):
        return VList(lhs.items + rhs.items)
    if isinstance(lhs, VText) and isinstance(rhs, VText):
        return VText(lhs.value + rhs.value)
    return _binary(InfixOp.PLUS, operator.add, lhs, rhs)


def sub(lhs: Value, rhs: Value) -> Value:
    return _binary(InfixOp.MINUS, operator.sub, lhs, rhs)


def neg(value: Value) -> Value:
    return VNumber(_compute(InfixOp.MINUS, operator.neg, _numeric(value, InfixOp.MINUS)))


def mul(lhs: Value, rhs: Value) -> Value:
    return _binary(InfixOp.MUL, operator.mul, lhs, rhs)


def _divide(a: Number, b: Number) -> Number:
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def div(lhs: Value, rhs: Value) -> Value:
    """Divide; an exact quotient of two integers stays an integer."""
    return _binary(InfixOp.DIV, _divide, lhs, rhs)


def _power(base: Number, exp: Number) -> Number:
    if isinstance(base, int) and isinstance(exp, int) and exp > 0 and abs(base) > 1:
        # Result width is about exp * bits(base); refuse before allocating it
        if (abs(base).bit_length() - 1) * exp > MAX_INT_BITS:
            raise InvalidOperation(InfixOp.POW, "result is too large")
    return base ** exp


def pow(lhs: Value, rhs: Value) -> Value:
    return _binary(InfixOp.POW, _power, lhs, rhs)
