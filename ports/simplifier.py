"""
Port: Simplifier
Odpowiedzialność: przepisywanie AST według lokalnych tożsamości algebraicznych.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class Simplifier(Protocol):
    def simplify_top(self, ast: ExprAST) -> ExprAST:
        """
        Applies the first matching identity at the root only:
        x + 0 → x,  x * 1 → x,  _ * 0 → 0.  Children are left untouched.
        """
        ...

    def simplify_all(self, ast: ExprAST) -> ExprAST:
        """
        Applies the identities throughout the whole tree and additionally
        folds x + x → 2 * x when both operands are structurally equal.
        The result is idempotent: simplify_all(simplify_all(e)) == simplify_all(e).
        """
        ...

    def fold_constants(self, ast: ExprAST) -> ExprAST:
        """
        Constant-folds an AST: BinOpNode(NumberNode, NumberNode) → NumberNode.
        Divisions by zero are left in place.
        """
        ...
