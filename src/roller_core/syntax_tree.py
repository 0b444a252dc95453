"""Syntax tree for Roller commands.

A parser builds these nodes; the evaluator consumes them. All nodes are
frozen, so a tree never changes after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Union

from .errors import MalformedAST
from .values import Value, VList, VNumber, VText


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

class InfixOp(Enum):
    DICE = "d"
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    def __str__(self) -> str:
        return self.value


class CmpOp(Enum):
    EQ = "=="
    INEQ = "!="
    GT = ">"
    LT = "<"
    GTEQ = ">="
    LTEQ = "<="

    def __str__(self) -> str:
        return self.value


class LogConnOp(Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"

    def __str__(self) -> str:
        return self.value


PredOp = Union[CmpOp, LogConnOp]


# ---------------------------------------------------------------------------
# Expressions: produce a value, never change the environment
# ---------------------------------------------------------------------------

class Expr:
    __slots__ = ()


def _is_value(value: object) -> bool:
    if isinstance(value, VNumber):
        return isinstance(value.value, (int, float)) and not isinstance(value.value, bool)
    if isinstance(value, VText):
        return isinstance(value.value, str)
    if isinstance(value, VList):
        return all(_is_value(item) for item in value.items)
    return False


@dataclass(frozen=True)
class Val(Expr):
    value: Value

    def __post_init__(self) -> None:
        if not _is_value(self.value):
            raise MalformedAST(f"{self.value!r} is not a value")


@dataclass(frozen=True)
class ListExpr(Expr):
    items: tuple[Expr, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Range(Expr):
    start: Expr
    end: Expr
    step: Expr | None = None


@dataclass(frozen=True)
class Var(Expr):
    ident: str


@dataclass(frozen=True)
class FunCall(Expr):
    ident: str
    args: tuple[Expr, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class Op(Expr):
    """Operator application.

    Either operand may be absent: ``-a`` and ``+a`` leave *left* empty, and
    ``d6`` / ``3d`` rely on the dice operator's default of 1.
    """

    op: InfixOp
    left: Expr | None = None
    right: Expr | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.op, InfixOp):
            raise MalformedAST(f"{self.op!r} is not an infix operator")


@dataclass(frozen=True)
class Filter(Expr):
    source: Expr
    pred: Pred


# ---------------------------------------------------------------------------
# Predicates used by Filter
# ---------------------------------------------------------------------------

class Pred:
    __slots__ = ()


@dataclass(frozen=True)
class Index(Pred):
    expr: Expr


@dataclass(frozen=True)
class Cmp(Pred):
    op: CmpOp
    right: Expr


@dataclass(frozen=True)
class LogConn(Pred):
    op: LogConnOp
    right: Pred
    left: Pred | None = None


@dataclass(frozen=True)
class ListPred(Pred):
    inner: Pred | None = None


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RollerFun:
    """A user-defined function: parameter names plus a body expression."""

    params: tuple[str, ...]
    body: Expr

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    @property
    def arity(self) -> int:
        return len(self.params)


# ---------------------------------------------------------------------------
# Statements: change the environment, produce nothing
# ---------------------------------------------------------------------------

class Stmt:
    __slots__ = ()


@dataclass(frozen=True)
class Assign(Stmt):
    ident: str
    expr: Expr


@dataclass(frozen=True)
class FnDef(Stmt):
    ident: str
    fun: RollerFun


@dataclass(frozen=True)
class Delete(Stmt):
    ident: str


@dataclass(frozen=True)
class Clear(Stmt):
    pass


@dataclass(frozen=True)
class Run(Stmt):
    path: PurePath

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", PurePath(self.path))


@dataclass(frozen=True)
class Save(Stmt):
    path: PurePath

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", PurePath(self.path))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Statement:
    stmt: Stmt

    def __post_init__(self) -> None:
        if not isinstance(self.stmt, Stmt):
            raise MalformedAST(f"{type(self.stmt).__name__} is not a statement")


@dataclass(frozen=True)
class Expression:
    expr: Expr

    def __post_init__(self) -> None:
        if not isinstance(self.expr, Expr):
            raise MalformedAST(f"{type(self.expr).__name__} is not an expression")


Cmd = Union[Statement, Expression]
