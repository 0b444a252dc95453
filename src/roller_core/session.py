"""RollerSession — runs commands one after another against one environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .environment import RollerEnv
from .errors import RollerError
from .evaluator import evaluate_cmd
from .syntax_tree import Cmd
from .values import Value

logger = logging.getLogger(__name__)


@dataclass
class RollerSession:
    """Stateful runner that keeps bindings and results across commands.

    Usage::

        session = RollerSession(RollerEnv.seeded(7))
        session.eval(Statement(Assign("x", Op(InfixOp.DICE, Val(VNumber(2)), Val(VNumber(6))))))
        session.eval(Expression(Var("x")))   # -> VList([...])

        session.results       # every value produced so far
        session.reset()       # clear state
    """

    environment: RollerEnv = field(default_factory=RollerEnv)
    results: list[Value] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    @property
    def last_result(self) -> Value | None:
        return self.results[-1] if self.results else None

    def eval(self, cmd: Cmd) -> Value | None:
        """Evaluate one command; errors propagate to the caller."""
        value = evaluate_cmd(cmd, self.environment)
        if value is not None:
            self.results.append(value)
        return value

    def run(self, cmds: Iterable[Cmd]) -> list[Value]:
        """Evaluate *cmds* in order, recording failures and carrying on.

        Returns the values produced by this call.
        """
        produced: list[Value] = []
        for cmd in cmds:
            try:
                value = self.eval(cmd)
            except RollerError as exc:
                logger.info("command failed: %s", exc)
                self.diagnostics.append(f"Error: {exc}")
                continue
            if value is not None:
                produced.append(value)
        return produced

    def reset(self) -> None:
        """Drop all bindings and history; the dice source is kept."""
        self.environment = RollerEnv(
            rng=self.environment.rng,
            builtins=self.environment.builtins,
            max_call_depth=self.environment.max_call_depth,
            max_roll_count=self.environment.max_roll_count,
        )
        self.results.clear()
        self.diagnostics.clear()
