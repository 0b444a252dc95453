"""Variable and function tables, plus the dice source."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .errors import ArityMismatch, InvalidOperation, UndefinedIdentifier
from .stdlib import BUILTINS, Builtin
from .syntax_tree import InfixOp, RollerFun
from .values import Value, VList, VNumber

logger = logging.getLogger(__name__)

DEFAULT_MAX_CALL_DEPTH = 64
DEFAULT_MAX_ROLL_COUNT = 100_000


@dataclass
class RollerEnv:
    """Holds everything a command can read or change."""

    variables: dict[str, Value] = field(default_factory=dict)
    functions: dict[str, RollerFun] = field(default_factory=dict)
    builtins: dict[str, Builtin] = field(default_factory=lambda: dict(BUILTINS))
    rng: random.Random = field(default_factory=random.Random)
    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
    max_roll_count: int = DEFAULT_MAX_ROLL_COUNT
    call_depth: int = 0

    @classmethod
    def seeded(cls, seed: int | str | None, **kwargs) -> RollerEnv:
        """Environment whose dice are reproducible for a given *seed*."""
        return cls(rng=random.Random(seed), **kwargs)

    # -- Variables ------------------------------------------------------

    def lookup(self, name: str) -> Value:
        try:
            return self.variables[name]
        except KeyError:
            raise UndefinedIdentifier(name) from None

    def assign(self, name: str, value: Value) -> None:
        self.functions.pop(name, None)
        self.variables[name] = value
        logger.debug("assigned %s = %s", name, value)

    # -- Functions ------------------------------------------------------

    def declare_function(self, name: str, fun: RollerFun) -> None:
        self.variables.pop(name, None)
        self.functions[name] = fun
        logger.debug("declared function %s(%s)", name, ", ".join(fun.params))

    def call(self, name: str, args: list[Value]) -> Value:
        """Call a user function, falling back to the builtins."""
        fun = self.functions.get(name)
        if fun is not None:
            return self._call_user(name, fun, args)
        builtin = self.builtins.get(name)
        if builtin is not None:
            return builtin(list(args))
        raise UndefinedIdentifier(name)

    def _call_user(self, name: str, fun: RollerFun, args: list[Value]) -> Value:
        from .evaluator import evaluate_expr

        if len(args) != fun.arity:
            raise ArityMismatch(name, fun.arity, len(args))
        if self.call_depth >= self.max_call_depth:
            raise InvalidOperation(
                name, f"call depth exceeded {self.max_call_depth}"
            )
        return evaluate_expr(fun.body, self._scope(dict(zip(fun.params, args))))

    def _scope(self, bindings: dict[str, Value]) -> RollerEnv:
        """Child environment for a function body; parameters shadow globals."""
        return RollerEnv(
            variables={**self.variables, **bindings},
            functions=self.functions,
            builtins=self.builtins,
            rng=self.rng,
            max_call_depth=self.max_call_depth,
            max_roll_count=self.max_roll_count,
            call_depth=self.call_depth + 1,
        )

    # -- Removal --------------------------------------------------------

    def delete(self, name: str) -> None:
        """Remove *name* from variables and functions; unbound is a no-op."""
        self.variables.pop(name, None)
        self.functions.pop(name, None)
        logger.debug("deleted %s", name)

    def clear(self) -> None:
        self.variables.clear()
        self.functions.clear()
        logger.debug("environment cleared")

    # -- Dice -----------------------------------------------------------

    def roll(self, count: int, sides: int) -> VList:
        """Roll *count* dice with *sides* faces; a zero-sided die shows 0."""
        if count > self.max_roll_count:
            raise InvalidOperation(
                InfixOp.DICE, f"cannot roll more than {self.max_roll_count} dice"
            )
        if sides == 0:
            draws = [0] * count
        else:
            draws = [self.rng.randint(1, sides) for _ in range(count)]
        logger.debug("rolled %dd%d -> %s", count, sides, draws)
        return VList(VNumber(d) for d in draws)
