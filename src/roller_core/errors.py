"""Error taxonomy for Roller Core.

Two tiers share the ``RollerError`` root:

- ``RollerSyntaxError`` — raised while a command is being built, before
  evaluation ever runs.
- ``EvalError`` — raised while a well-formed tree is being reduced.

Every error renders a one-line message through ``str()`` and carries a
short, stable ``description``.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .lexeme import Lexeme


# Integers wider than this are summarised instead of printed digit by digit
MAX_SHOWN_BITS = 3000


def format_number(value: int | float) -> str:
    """Render a number for messages; huge integers become a digit count."""
    if isinstance(value, int) and value.bit_length() > MAX_SHOWN_BITS:
        digits = int(value.bit_length() * math.log10(2)) + 1
        sign = "-" if value < 0 else ""
        return f"{sign}<integer of about {digits} digits>"
    return str(value)


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value


class RollerError(Exception):
    """Base class for every error raised by Roller Core."""

    description = "roller error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.description)

    @property
    def message(self) -> str:
        return str(self)


# ---------------------------------------------------------------------------
# Syntax tier
# ---------------------------------------------------------------------------

class RollerSyntaxError(RollerError):
    description = "syntax error"


class UnexpectedToken(RollerSyntaxError):
    description = "unexpected token"

    def __init__(self, token: Lexeme) -> None:
        self.token = token
        super().__init__(f"Unexpected token: {token}")


class InvalidFunctionCall(RollerSyntaxError):
    description = "invalid function call"

    def __init__(self) -> None:
        super().__init__("Invalid function call")


class UnexpectedEnd(RollerSyntaxError):
    description = "unexpected end of input"

    def __init__(self) -> None:
        super().__init__("Unexpected end of input")


class MalformedAST(RollerSyntaxError):
    description = "tried to create a malformed command"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        msg = "Tried to create a malformed command"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class EmptyCommand(RollerSyntaxError):
    description = "tried to create an empty command"

    def __init__(self) -> None:
        super().__init__("Tried to create an empty command")


class TooManyParameters(RollerSyntaxError):
    description = "too many parameters"

    def __init__(self) -> None:
        super().__init__("Too many parameters")


class UnimplementedSyntax(RollerSyntaxError):
    description = "unimplemented feature"

    def __init__(self) -> None:
        super().__init__("Unimplemented feature")


# ---------------------------------------------------------------------------
# Evaluation tier
# ---------------------------------------------------------------------------

class EvalError(RollerError):
    description = "evaluation error"


class MissingOperand(EvalError):
    description = "missing operand"

    def __init__(self, op: Any, side: Side) -> None:
        self.op = op
        self.side = side
        super().__init__(f"Missing {side} operand for operator '{op}'")


class NoOperands(EvalError):
    description = "no operands"

    def __init__(self, op: Any) -> None:
        self.op = op
        super().__init__(f"No operands given to operator '{op}'")


class TypeMismatch(EvalError):
    description = "type mismatch"

    def __init__(self, expected: Any, found: Any) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected a value of type {expected}, found {found}")


class NonPositiveArgument(EvalError):
    description = "expected a non-negative number"

    def __init__(self, value: int | float) -> None:
        self.value = value
        super().__init__(
            f"Expected a non-negative number, found {format_number(value)}"
        )


class UndefinedIdentifier(EvalError):
    description = "undefined identifier"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined identifier '{name}'")


class ArityMismatch(EvalError):
    description = "wrong number of arguments"

    def __init__(self, name: str, expected: int | str, found: int) -> None:
        self.name = name
        self.expected = expected
        self.found = found
        super().__init__(
            f"Function '{name}' expects {expected} argument(s), got {found}"
        )


class DivisionByZero(EvalError):
    description = "division by zero"

    def __init__(self, op: Any) -> None:
        self.op = op
        super().__init__(f"Division by zero in operator '{op}'")


class InvalidOperation(EvalError):
    description = "invalid operation"

    def __init__(self, op: Any, detail: str) -> None:
        self.op = op
        self.detail = detail
        super().__init__(f"Invalid operation '{op}': {detail}")


class Unimplemented(EvalError):
    description = "unimplemented feature"

    def __init__(self, feature: str | None = None) -> None:
        self.feature = feature
        msg = "Unimplemented feature"
        if feature:
            msg += f": {feature}"
        super().__init__(msg)
