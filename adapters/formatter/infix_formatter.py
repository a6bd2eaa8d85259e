"""
Adapter: InfixFormatter
Implementuje port Formatter.

Priorytety (mniejszy = wiąże mocniej):
  NumberNode      0
  Times, Div      1
  Plus, Minus     2

Dziecko dostaje nawiasy tylko gdy jego priorytet jest ŚCIŚLE większy od
priorytetu rodzica. Łączność nie jest brana pod uwagę:
BinOp(Minus, 1, BinOp(Minus, 2, 3)) → "1 - 2 - 3". To zamierzone zachowanie.
"""
from __future__ import annotations

from contracts import BinOpNode, ExprAST, NumberNode, Op

_OP_SYMBOLS = {
    Op.PLUS:  " + ",
    Op.MINUS: " - ",
    Op.TIMES: " * ",
    Op.DIV:   " / ",
}

_OP_PRECEDENCE = {
    Op.TIMES: 1,
    Op.DIV:   1,
    Op.PLUS:  2,
    Op.MINUS: 2,
}


def precedence(node: ExprAST) -> int:
    if isinstance(node, NumberNode):
        return 0
    if isinstance(node, BinOpNode):
        return _OP_PRECEDENCE[node.op]
    raise TypeError(f"Nieznany typ węzła AST: {type(node)}")


class InfixFormatter:
    """Minimalnie nawiasowany zapis infiksowy."""

    # -- Formatter protocol ------------------------------------------------

    def format(self, ast: ExprAST) -> str:
        if isinstance(ast, NumberNode):
            return str(ast.value)
        if isinstance(ast, BinOpNode):
            parent = precedence(ast)
            return (
                self._operand(ast.left, parent)
                + _OP_SYMBOLS[ast.op]
                + self._operand(ast.right, parent)
            )
        raise TypeError(f"Nieznany typ węzła AST: {type(ast)}")

    # -- Prywatne ----------------------------------------------------------

    def _operand(self, child: ExprAST, parent_precedence: int) -> str:
        text = self.format(child)
        if precedence(child) > parent_precedence:
            return f"({text})"
        return text
