"""Tests for roller_core.stdlib."""

import pytest

from roller_core import ArityMismatch, InvalidOperation, TypeMismatch, VList, VNumber, VText
from roller_core.stdlib import BUILTINS


def nums(*xs):
    return VList([VNumber(x) for x in xs])


def test_sum_flattens_lists():
    assert BUILTINS["sum"]([nums(1, 2, 3), VNumber(4)]) == VNumber(10)


def test_sum_of_nothing_is_zero():
    assert BUILTINS["sum"]([]) == VNumber(0)


def test_len():
    assert BUILTINS["len"]([nums(5, 5)]) == VNumber(2)
    assert BUILTINS["len"]([VText("abc")]) == VNumber(3)


def test_len_arity():
    with pytest.raises(ArityMismatch) as info:
        BUILTINS["len"]([nums(1), nums(2)])
    assert info.value.expected == 1
    assert info.value.found == 2


def test_max_min():
    assert BUILTINS["max"]([nums(3, 9, 4)]) == VNumber(9)
    assert BUILTINS["min"]([nums(3, 9), VNumber(1)]) == VNumber(1)


def test_max_of_nothing():
    with pytest.raises(InvalidOperation):
        BUILTINS["max"]([])


def test_abs():
    assert BUILTINS["abs"]([VNumber(-4)]) == VNumber(4)
    with pytest.raises(TypeMismatch):
        BUILTINS["abs"]([nums(1)])


def test_sort():
    assert BUILTINS["sort"]([nums(4, 1, 3)]) == nums(1, 3, 4)


def test_sort_rejects_text_items():
    with pytest.raises(TypeMismatch):
        BUILTINS["sort"]([VList([VText("b"), VText("a")])])


def test_sum_overflow():
    with pytest.raises(InvalidOperation):
        BUILTINS["sum"]([VNumber(10**400), VNumber(0.5)])
    with pytest.raises(InvalidOperation):
        BUILTINS["sum"]([nums(1e308, 1e308)])
