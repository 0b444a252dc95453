"""Lexical tokens as handed over by a tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LexemeKind(Enum):
    NUMBER = auto()
    IDENT = auto()
    OPERATOR = auto()
    CMP_OPERATOR = auto()
    KEYWORD = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    OPEN_BRACE = auto()
    CLOSE_BRACE = auto()
    COMMA = auto()
    ASSIGN = auto()
    END = auto()


@dataclass(frozen=True, slots=True)
class Lexeme:
    kind: LexemeKind
    text: str = ""
    position: int | None = None

    def __str__(self) -> str:
        if self.kind is LexemeKind.END:
            return "end of input"
        where = f" at {self.position}" if self.position is not None else ""
        return f"'{self.text}'{where}"
