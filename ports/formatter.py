"""
Port: Formatter
Odpowiedzialność: zamiana AST na tekst infiksowy z minimalną liczbą nawiasów.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class Formatter(Protocol):
    def format(self, ast: ExprAST) -> str:
        """
        Renders the AST as infix text, e.g. "(3 + 4) * 5".
        A child is parenthesised only when it binds more loosely than its parent.
        """
        ...
