"""
arithmos_core.py — funkcje wolne nad domyślnymi adapterami.

    Number(3), BinOp(Op.PLUS, l, r)   — konstruktory (z contracts)
    evaluate(e)      -> int | None    — None = dzielenie przez zero
    format_expr(e)   -> str
    simplify_top(e)  -> ExprAST
    simplify_all(e)  -> ExprAST
"""
from __future__ import annotations

from typing import Optional

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.formatter.infix_formatter import InfixFormatter
from adapters.simplifier.rule_simplifier import RuleSimplifier
from contracts import BinOp, BinOpNode, ExprAST, ExprReport, Number, NumberNode, Op

__all__ = [
    "BinOp",
    "Number",
    "Op",
    "analyze",
    "depth",
    "eval_with_policy",
    "evaluate",
    "fold_constants",
    "format_expr",
    "simplify_all",
    "simplify_top",
    "size",
]

_EVALUATOR = ASTEvaluator(record_steps=False)
_FORMATTER = InfixFormatter()
_SIMPLIFIER = RuleSimplifier(evaluator=_EVALUATOR)


def evaluate(e: ExprAST) -> Optional[int]:
    return _EVALUATOR.eval_expr(e).value


def eval_with_policy(e: ExprAST) -> float:
    return _EVALUATOR.eval_with_policy(e)


def format_expr(e: ExprAST) -> str:
    return _FORMATTER.format(e)


def simplify_top(e: ExprAST) -> ExprAST:
    return _SIMPLIFIER.simplify_top(e)


def simplify_all(e: ExprAST) -> ExprAST:
    return _SIMPLIFIER.simplify_all(e)


def fold_constants(e: ExprAST) -> ExprAST:
    return _SIMPLIFIER.fold_constants(e)


def depth(e: ExprAST) -> int:
    """Liczba poziomów drzewa; liść ma głębokość 1."""
    if isinstance(e, NumberNode):
        return 1
    if isinstance(e, BinOpNode):
        return 1 + max(depth(e.left), depth(e.right))
    raise TypeError(f"Nieznany typ węzła AST: {type(e)}")


def size(e: ExprAST) -> int:
    if isinstance(e, NumberNode):
        return 1
    if isinstance(e, BinOpNode):
        return 1 + size(e.left) + size(e.right)
    raise TypeError(f"Nieznany typ węzła AST: {type(e)}")


def analyze(
    e: ExprAST,
    evaluator: ASTEvaluator | None = None,
    formatter: InfixFormatter | None = None,
    simplifier: RuleSimplifier | None = None,
) -> ExprReport:
    """Uruchamia wszystkie komponenty na jednym drzewie i zbiera wyniki."""
    evaluator = evaluator or ASTEvaluator()
    formatter = formatter or _FORMATTER
    simplifier = simplifier or _SIMPLIFIER

    result = evaluator.eval_expr(e)
    return ExprReport(
        expr=e,
        formatted=formatter.format(e),
        value=result.value,
        simplified_top=simplifier.simplify_top(e),
        simplified_all=simplifier.simplify_all(e),
        folded=simplifier.fold_constants(e),
        depth=depth(e),
        size=size(e),
        steps=result.steps,
    )
