"""Evaluator: reduces commands against a RollerEnv."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from . import arithmetic
from .environment import RollerEnv
from .errors import (
    MalformedAST,
    MissingOperand,
    NoOperands,
    NonPositiveArgument,
    Side,
    TypeMismatch,
    Unimplemented,
)
from .syntax_tree import (
    Assign,
    Clear,
    Cmd,
    Delete,
    Expr,
    Expression,
    Filter,
    FnDef,
    FunCall,
    InfixOp,
    ListExpr,
    Op,
    Range,
    Run,
    Save,
    Statement,
    Stmt,
    Val,
    Var,
)
from .values import RollerType, Value, VList, VNumber, type_of

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate_cmd(cmd: Cmd, env: RollerEnv) -> Value | None:
    """Evaluate a command.

    Returns ``None`` for a statement and the produced value for an
    expression. Failures raise a ``RollerError``.
    """
    if isinstance(cmd, Statement):
        logger.debug("statement %s", type(cmd.stmt).__name__)
        evaluate_stmt(cmd.stmt, env)
        return None
    if isinstance(cmd, Expression):
        logger.debug("expression %s", type(cmd.expr).__name__)
        return evaluate_expr(cmd.expr, env)
    raise MalformedAST(f"{type(cmd).__name__} is not a command")


evaluate = evaluate_cmd


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def evaluate_stmt(stmt: Stmt, env: RollerEnv) -> None:
    if isinstance(stmt, Assign):
        # Evaluate fully before touching the environment
        value = evaluate_expr(stmt.expr, env)
        env.assign(stmt.ident, value)
    elif isinstance(stmt, FnDef):
        env.declare_function(stmt.ident, stmt.fun)
    elif isinstance(stmt, Delete):
        env.delete(stmt.ident)
    elif isinstance(stmt, Clear):
        env.clear()
    elif isinstance(stmt, Run):
        raise Unimplemented(f"run {stmt.path}")
    elif isinstance(stmt, Save):
        raise Unimplemented(f"save {stmt.path}")
    elif isinstance(stmt, Stmt):
        raise Unimplemented(type(stmt).__name__)
    else:
        raise MalformedAST(f"{type(stmt).__name__} is not a statement")


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

def evaluate_expr(expr: Expr, env: RollerEnv) -> Value:
    if isinstance(expr, Val):
        return expr.value
    if isinstance(expr, ListExpr):
        return VList(_evaluate_all(expr.items, env))
    if isinstance(expr, Var):
        return env.lookup(expr.ident)
    if isinstance(expr, FunCall):
        return env.call(expr.ident, _evaluate_all(expr.args, env))
    if isinstance(expr, Op):
        if expr.op is InfixOp.DICE:
            return _evaluate_dice(expr, env)
        lhs = _evaluate_opt(expr.left, env)
        rhs = _evaluate_opt(expr.right, env)
        return reduce_op(expr.op, lhs, rhs)
    if isinstance(expr, Range):
        raise Unimplemented("range")
    if isinstance(expr, Filter):
        raise Unimplemented("filter")
    raise MalformedAST(f"{type(expr).__name__} is not an expression")


def _evaluate_all(exprs: Iterable[Expr], env: RollerEnv) -> list[Value]:
    """Evaluate left to right; the first error propagates."""
    return [evaluate_expr(e, env) for e in exprs]


def _evaluate_opt(expr: Expr | None, env: RollerEnv) -> Value | None:
    if expr is None:
        return None
    return evaluate_expr(expr, env)


# ---------------------------------------------------------------------------
# Dice
# ---------------------------------------------------------------------------

def _dice_operand(expr: Expr | None, env: RollerEnv) -> int:
    """An absent dice operand means 1; a present one must be an integer."""
    if expr is None:
        return 1
    value = evaluate_expr(expr, env)
    if isinstance(value, VNumber) and value.is_int():
        return value.as_int()
    raise TypeMismatch(RollerType.NUM_INT, type_of(value))


def _evaluate_dice(expr: Op, env: RollerEnv) -> Value:
    count = _dice_operand(expr.left, env)
    sides = _dice_operand(expr.right, env)
    if count < 0:
        raise NonPositiveArgument(count)
    if sides < 0:
        raise NonPositiveArgument(sides)
    return env.roll(count, sides)


# ---------------------------------------------------------------------------
# Operator reduction
# ---------------------------------------------------------------------------

def _plus(op: InfixOp, lhs: Value | None, rhs: Value | None) -> Value:
    if rhs is None:
        raise MissingOperand(op, Side.RIGHT)
    if lhs is None:
        return rhs
    return arithmetic.add(lhs, rhs)


def _minus(op: InfixOp, lhs: Value | None, rhs: Value | None) -> Value:
    if rhs is None:
        raise MissingOperand(op, Side.RIGHT)
    if lhs is None:
        return arithmetic.neg(rhs)
    return arithmetic.sub(lhs, rhs)


def _strict(fun: Callable[[Value, Value], Value]):
    """Rule for operators that need both operands."""

    def rule(op: InfixOp, lhs: Value | None, rhs: Value | None) -> Value:
        if lhs is None and rhs is None:
            raise NoOperands(op)
        if lhs is None:
            raise MissingOperand(op, Side.LEFT)
        if rhs is None:
            raise MissingOperand(op, Side.RIGHT)
        return fun(lhs, rhs)

    return rule


OPERATOR_RULES = {
    InfixOp.PLUS: _plus,
    InfixOp.MINUS: _minus,
    InfixOp.MUL: _strict(arithmetic.mul),
    InfixOp.DIV: _strict(arithmetic.div),
    InfixOp.POW: _strict(arithmetic.pow),
}


def reduce_op(op: InfixOp, lhs: Value | None, rhs: Value | None) -> Value:
    """Apply *op* to already evaluated operands."""
    if op is InfixOp.DICE:
        raise AssertionError("dice must be evaluated before operator reduction")
    return OPERATOR_RULES[op](op, lhs, rhs)
