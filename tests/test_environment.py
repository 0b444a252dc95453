"""Tests for roller_core.environment."""

import random

import pytest

from roller_core import (
    ArityMismatch,
    InfixOp,
    InvalidOperation,
    Op,
    RollerEnv,
    RollerFun,
    UndefinedIdentifier,
    Val,
    Var,
    VList,
    VNumber,
    FunCall,
)


class TestVariables:
    def test_roundtrip(self):
        env = RollerEnv()
        env.assign("x", VNumber(10))
        assert env.lookup("x") == VNumber(10)

    def test_undefined(self):
        env = RollerEnv()
        with pytest.raises(UndefinedIdentifier) as info:
            env.lookup("nope")
        assert info.value.name == "nope"

    def test_assign_overwrites(self):
        env = RollerEnv()
        env.assign("x", VNumber(1))
        env.assign("x", VNumber(2))
        assert env.lookup("x") == VNumber(2)

    def test_assign_replaces_function(self):
        env = RollerEnv()
        env.declare_function("f", RollerFun([], Val(VNumber(1))))
        env.assign("f", VNumber(5))
        assert "f" not in env.functions
        assert env.lookup("f") == VNumber(5)


class TestFunctions:
    def test_declare_replaces_variable(self):
        env = RollerEnv()
        env.assign("f", VNumber(5))
        env.declare_function("f", RollerFun([], Val(VNumber(1))))
        with pytest.raises(UndefinedIdentifier):
            env.lookup("f")

    def test_call_user_function(self):
        env = RollerEnv()
        env.declare_function("twice", RollerFun(["n"], Op(InfixOp.MUL, Var("n"), Val(VNumber(2)))))
        assert env.call("twice", [VNumber(21)]) == VNumber(42)

    def test_parameters_do_not_leak(self):
        env = RollerEnv()
        env.declare_function("id", RollerFun(["n"], Var("n")))
        env.call("id", [VNumber(1)])
        assert "n" not in env.variables

    def test_parameters_shadow_globals(self):
        env = RollerEnv()
        env.assign("n", VNumber(100))
        env.declare_function("id", RollerFun(["n"], Var("n")))
        assert env.call("id", [VNumber(1)]) == VNumber(1)

    def test_body_sees_globals(self):
        env = RollerEnv()
        env.assign("bonus", VNumber(3))
        env.declare_function("plus_bonus", RollerFun(["n"], Op(InfixOp.PLUS, Var("n"), Var("bonus"))))
        assert env.call("plus_bonus", [VNumber(4)]) == VNumber(7)

    def test_duplicate_params_last_wins(self):
        env = RollerEnv()
        env.declare_function("f", RollerFun(["a", "a"], Var("a")))
        assert env.call("f", [VNumber(1), VNumber(2)]) == VNumber(2)

    def test_arity_mismatch(self):
        env = RollerEnv()
        env.declare_function("f", RollerFun(["a", "b"], Var("a")))
        with pytest.raises(ArityMismatch) as info:
            env.call("f", [VNumber(1)])
        assert info.value.expected == 2
        assert info.value.found == 1

    def test_undefined_function(self):
        with pytest.raises(UndefinedIdentifier):
            RollerEnv().call("nope", [])

    def test_builtin_fallback(self):
        env = RollerEnv()
        assert env.call("sum", [VNumber(1), VNumber(2)]) == VNumber(3)

    def test_user_function_shadows_builtin(self):
        env = RollerEnv()
        env.declare_function("sum", RollerFun([], Val(VNumber(0))))
        assert env.call("sum", []) == VNumber(0)

    def test_runaway_recursion(self):
        env = RollerEnv(max_call_depth=8)
        env.declare_function("loop", RollerFun([], FunCall("loop", [])))
        with pytest.raises(InvalidOperation):
            env.call("loop", [])


class TestRemoval:
    def test_delete_variable_and_function(self):
        env = RollerEnv()
        env.assign("x", VNumber(1))
        env.declare_function("f", RollerFun([], Val(VNumber(1))))
        env.delete("x")
        env.delete("f")
        assert env.variables == {}
        assert env.functions == {}

    def test_delete_unbound_is_noop(self):
        env = RollerEnv()
        env.delete("ghost")
        assert env.variables == {}

    def test_delete_keeps_builtins(self):
        env = RollerEnv()
        env.delete("sum")
        assert env.call("sum", [VNumber(2)]) == VNumber(2)

    def test_clear(self):
        env = RollerEnv()
        env.assign("x", VNumber(1))
        env.declare_function("f", RollerFun([], Val(VNumber(1))))
        env.clear()
        assert env.variables == {}
        assert env.functions == {}
        assert "sum" in env.builtins


class TestRoll:
    @pytest.mark.parametrize("count, sides", [(0, 6), (1, 1), (3, 6), (20, 20), (50, 2)])
    def test_count_and_range(self, count, sides):
        result = RollerEnv.seeded(1).roll(count, sides)
        assert isinstance(result, VList)
        assert len(result) == count
        assert all(v.is_int() and 1 <= v.value <= sides for v in result)

    def test_zero_sided_die(self):
        assert RollerEnv.seeded(1).roll(2, 0) == VList([VNumber(0), VNumber(0)])

    def test_seeded_is_reproducible(self):
        assert RollerEnv.seeded(42).roll(10, 6) == RollerEnv.seeded(42).roll(10, 6)

    def test_uses_given_rng(self):
        expected = random.Random(5)
        env = RollerEnv(rng=random.Random(5))
        faces = [expected.randint(1, 8) for _ in range(4)]
        assert env.roll(4, 8) == VList([VNumber(f) for f in faces])

    def test_roll_count_limit(self):
        env = RollerEnv(max_roll_count=10)
        assert len(env.roll(10, 6)) == 10
        with pytest.raises(InvalidOperation):
            env.roll(11, 6)
