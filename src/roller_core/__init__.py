"""Roller Core — syntax tree and evaluator for dice-notation commands."""

from .environment import RollerEnv
from .errors import (
    ArityMismatch,
    DivisionByZero,
    EmptyCommand,
    EvalError,
    InvalidFunctionCall,
    InvalidOperation,
    MalformedAST,
    MissingOperand,
    NoOperands,
    NonPositiveArgument,
    RollerError,
    RollerSyntaxError,
    Side,
    TooManyParameters,
    TypeMismatch,
    UndefinedIdentifier,
    UnexpectedEnd,
    UnexpectedToken,
    Unimplemented,
    UnimplementedSyntax,
)
from .evaluator import evaluate, evaluate_cmd, evaluate_expr, evaluate_stmt
from .lexeme import Lexeme, LexemeKind
from .session import RollerSession
from .syntax_tree import (
    Assign,
    Clear,
    Cmd,
    Cmp,
    CmpOp,
    Delete,
    Expr,
    Expression,
    Filter,
    FnDef,
    FunCall,
    Index,
    InfixOp,
    ListExpr,
    ListPred,
    LogConn,
    LogConnOp,
    Op,
    Pred,
    PredOp,
    Range,
    RollerFun,
    Run,
    Save,
    Statement,
    Stmt,
    Val,
    Var,
)
from .values import RollerType, Value, VList, VNumber, VText, type_of

__all__ = [
    "evaluate",
    "evaluate_cmd",
    "evaluate_expr",
    "evaluate_stmt",
    "RollerEnv",
    "RollerSession",
    # values
    "RollerType",
    "Value",
    "VList",
    "VNumber",
    "VText",
    "type_of",
    # syntax tree
    "Cmd",
    "Statement",
    "Expression",
    "Stmt",
    "Assign",
    "FnDef",
    "Delete",
    "Clear",
    "Run",
    "Save",
    "Expr",
    "Val",
    "ListExpr",
    "Range",
    "Var",
    "FunCall",
    "Op",
    "Filter",
    "Pred",
    "Index",
    "Cmp",
    "LogConn",
    "ListPred",
    "InfixOp",
    "CmpOp",
    "LogConnOp",
    "PredOp",
    "RollerFun",
    "Lexeme",
    "LexemeKind",
    # errors
    "RollerError",
    "RollerSyntaxError",
    "EvalError",
    "Side",
    "UnexpectedToken",
    "InvalidFunctionCall",
    "UnexpectedEnd",
    "MalformedAST",
    "EmptyCommand",
    "TooManyParameters",
    "UnimplementedSyntax",
    "MissingOperand",
    "NoOperands",
    "TypeMismatch",
    "NonPositiveArgument",
    "UndefinedIdentifier",
    "ArityMismatch",
    "DivisionByZero",
    "InvalidOperation",
    "Unimplemented",
]
