"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście ExprAST na liczbach całkowitych.

Dzielenie obcina wynik w stronę zera (7 / -2 = -3), a nie w dół jak `//`.
Dzielenie przez zero nie rzuca wyjątku na zewnątrz: wynik jest niezdefiniowany
(EvalResult.value is None).

eval_expr()        — oblicza wartość i kroki
eval_with_policy() — jak wyżej, ale niezdefiniowany wynik → +inf / -inf / nan
"""
from __future__ import annotations

import logging
import math
from typing import Callable

from contracts import BinOpNode, EvalResult, ExprAST, NumberNode, Op

logger = logging.getLogger("arithmos.evaluator")

_SYMBOLS = {Op.PLUS: "+", Op.MINUS: "-", Op.TIMES: "*", Op.DIV: "/"}


class UndefinedDivision(ZeroDivisionError):
    """Dzielenie przez zero w trakcie ewaluacji; pamięta dzielną."""

    def __init__(self, dividend: int) -> None:
        super().__init__(f"{dividend} / 0 jest niezdefiniowane")
        self.dividend = dividend


def trunc_div(a: int, b: int) -> int:
    """Iloraz zaokrąglany w stronę zera."""
    if b == 0:
        raise UndefinedDivision(a)
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


_OP_FUNCS: dict[Op, Callable[[int, int], int]] = {
    Op.PLUS:  lambda a, b: a + b,
    Op.MINUS: lambda a, b: a - b,
    Op.TIMES: lambda a, b: a * b,
    Op.DIV:   trunc_div,
}


class ASTEvaluator:
    """Dokładny ewaluator wyrażeń arytmetycznych oparty na AST."""

    def __init__(self, record_steps: bool = True) -> None:
        self._record_steps = record_steps

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Rekurencyjnie oblicza wartość AST.
        Zwraca EvalResult z wartością (None = niezdefiniowana) i krokami.
        """
        steps: list[str] | None = [] if self._record_steps else None
        try:
            value = self._eval(ast, steps)
        except UndefinedDivision as exc:
            logger.debug("Wynik niezdefiniowany: %s", exc)
            if steps is not None:
                steps.append(f"{exc.dividend} / 0 = undefined")
            return EvalResult(value=None, steps=steps or [])
        return EvalResult(value=value, steps=steps or [])

    def eval_with_policy(self, ast: ExprAST) -> float:
        try:
            return float(self._eval(ast, None))
        except UndefinedDivision as exc:
            if exc.dividend > 0:
                return math.inf
            if exc.dividend < 0:
                return -math.inf
            return math.nan

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, node: ExprAST, steps: list[str] | None) -> int:
        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, BinOpNode):
            left_val = self._eval(node.left, steps)
            right_val = self._eval(node.right, steps)
            result = _OP_FUNCS[node.op](left_val, right_val)
            if steps is not None:
                steps.append(f"{left_val} {_SYMBOLS[node.op]} {right_val} = {result}")
            return result

        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
