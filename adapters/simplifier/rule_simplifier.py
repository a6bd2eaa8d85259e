"""
Adapter: RuleSimplifier
Implementuje port Simplifier — przepisywanie AST regułami, pierwsza pasująca wygrywa.

simplify_top() — tylko korzeń:
  1. x + 0  → x
  2. x * 1  → x
  3. _ * 0  → 0   (zwracany jest dopasowany węzeł zera, nie nowy)
  4. inaczej → bez zmian

simplify_all() — rekurencyjnie, te same reguły plus:
  4. x + y, gdzie x == y strukturalnie → 2 * x
  5. BinOp(op, l, r) → BinOp(op, simplify_all(l), simplify_all(r))
  Przebieg powtarzany aż do punktu stałego, więc wynik jest idempotentny.
  Każdy przebieg zmieniający drzewo zmniejsza (rozmiar, liczba Plus),
  więc pętla się kończy.

fold_constants() — constant-folding: BinOpNode(Num, Num) → Num
"""
from __future__ import annotations

import logging

from adapters.evaluator.ast_evaluator import ASTEvaluator
from contracts import BinOp, BinOpNode, ExprAST, Number, NumberNode, Op
from ports.evaluator import Evaluator

logger = logging.getLogger("arithmos.simplifier")


def _is_literal(node: ExprAST, value: int) -> bool:
    return isinstance(node, NumberNode) and node.value == value


class RuleSimplifier:
    """Upraszczanie wyrażeń tożsamościami x+0, x*1, x*0 i x+x."""

    def __init__(self, evaluator: Evaluator | None = None) -> None:
        self._evaluator = evaluator or ASTEvaluator(record_steps=False)

    # -- Simplifier protocol -----------------------------------------------

    def simplify_top(self, ast: ExprAST) -> ExprAST:
        if isinstance(ast, NumberNode):
            return ast
        if isinstance(ast, BinOpNode):
            if ast.op is Op.PLUS and _is_literal(ast.right, 0):
                logger.debug("simplify_top: x + 0 → x")
                return ast.left
            if ast.op is Op.TIMES and _is_literal(ast.right, 1):
                logger.debug("simplify_top: x * 1 → x")
                return ast.left
            if ast.op is Op.TIMES and _is_literal(ast.right, 0):
                logger.debug("simplify_top: _ * 0 → 0")
                return ast.right
            return ast
        raise TypeError(f"Nieznany typ węzła AST: {type(ast)}")

    def simplify_all(self, ast: ExprAST) -> ExprAST:
        current = ast
        while True:
            simplified = self._simplify_pass(current)
            if simplified == current:
                return simplified
            current = simplified

    def fold_constants(self, ast: ExprAST) -> ExprAST:
        if isinstance(ast, NumberNode):
            return ast
        if isinstance(ast, BinOpNode):
            left = self.fold_constants(ast.left)
            right = self.fold_constants(ast.right)
            if isinstance(left, NumberNode) and isinstance(right, NumberNode):
                result = self._evaluator.eval_expr(BinOp(ast.op, left, right))
                if result.is_defined:
                    return Number(result.value)
            return BinOp(ast.op, left, right)
        raise TypeError(f"Nieznany typ węzła AST: {type(ast)}")

    # -- Prywatne ----------------------------------------------------------

    def _simplify_pass(self, node: ExprAST) -> ExprAST:
        if isinstance(node, NumberNode):
            return node
        if isinstance(node, BinOpNode):
            if node.op is Op.PLUS and _is_literal(node.right, 0):
                logger.debug("simplify_all: x + 0 → x")
                return self._simplify_pass(node.left)
            if node.op is Op.TIMES and _is_literal(node.right, 1):
                logger.debug("simplify_all: x * 1 → x")
                return self._simplify_pass(node.left)
            if node.op is Op.TIMES and _is_literal(node.right, 0):
                logger.debug("simplify_all: _ * 0 → 0")
                return node.right
            if node.op is Op.PLUS and node.left == node.right:
                logger.debug("simplify_all: x + x → 2 * x")
                return BinOp(Op.TIMES, Number(2), self._simplify_pass(node.right))
            return BinOp(
                node.op,
                self._simplify_pass(node.left),
                self._simplify_pass(node.right),
            )
        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")
