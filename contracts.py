"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w Arithmos.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

Zbiór wariantów ExprAST jest zamknięty: NumberNode i BinOpNode.
Dziedziczenie po węzłach poza tym modułem kończy się TypeError.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Operatory ───────────────────────────────────

class Op(str, Enum):
    PLUS = "Plus"
    MINUS = "Minus"
    TIMES = "Times"
    DIV = "Div"


# ─────────────────────────── AST ─────────────────────────────────────────

class _SealedNode(BaseModel):
    """Wspólna baza węzłów: niemutowalna, zamknięta na rozszerzenia z zewnątrz."""

    model_config = ConfigDict(frozen=True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"ExprAST jest zamknięty — nie można dodać wariantu {cls.__qualname__!r}"
            )


class NumberNode(_SealedNode):
    node_type: Literal["number"] = "number"
    value: StrictInt

    def __repr__(self) -> str:
        return f"Number({self.value})"


class BinOpNode(_SealedNode):
    node_type: Literal["binop"] = "binop"
    op: Op
    left: "ExprAST"
    right: "ExprAST"

    def __repr__(self) -> str:
        return f"BinOp({self.op.value}, {self.left!r}, {self.right!r})"


ExprAST = Annotated[Union[NumberNode, BinOpNode], Field(discriminator="node_type")]
BinOpNode.model_rebuild()

# Warianty w kolejności deklaracji — używane w testach kompletności dopasowań
EXPR_VARIANTS: tuple[type, ...] = (NumberNode, BinOpNode)

_EXPR_ADAPTER: TypeAdapter[ExprAST] = TypeAdapter(ExprAST)


def Number(value: int) -> NumberNode:
    return NumberNode(value=value)


def BinOp(op: Op, left: ExprAST, right: ExprAST) -> BinOpNode:
    return BinOpNode(op=op, left=left, right=right)


def parse_expr_json(text: str | bytes) -> ExprAST:
    """
    Wczytuje AST z jego własnej serializacji JSON (model_dump_json()).
    To nie jest parser tekstu "3 + 4"; błędny JSON → pydantic.ValidationError.
    """
    return _EXPR_ADAPTER.validate_json(text)


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: Optional[int]                            # None = wynik niezdefiniowany
    steps: list[str] = Field(default_factory=list)  # czytelne kroki

    @property
    def is_defined(self) -> bool:
        return self.value is not None


# ─────────────────────────── Raport (CLI) ────────────────────────────────

class ExprReport(BaseModel):
    expr: ExprAST
    formatted: str
    value: Optional[int]
    simplified_top: ExprAST
    simplified_all: ExprAST
    folded: ExprAST
    depth: int
    size: int
    steps: list[str] = Field(default_factory=list)
