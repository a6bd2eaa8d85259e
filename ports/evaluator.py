"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń AST.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Evaluates an arithmetic AST to an integer result.
        Division truncates toward zero.
        Returns EvalResult with:
          - value: int, or None when a division by zero makes the result undefined
          - steps: list of human-readable computation steps
        Never raises for well-formed ASTs; undefinedness is encoded in the result.
        """
        ...

    def eval_with_policy(self, ast: ExprAST) -> float:
        """
        Like eval_expr, but maps an undefined result to a float policy value:
        +inf / -inf / nan depending on the sign of the offending dividend.
        """
        ...
