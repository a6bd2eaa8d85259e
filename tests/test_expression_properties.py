from __future__ import annotations

import pytest

from arithmos_core import (
    depth,
    evaluate,
    fold_constants,
    format_expr,
    simplify_all,
    simplify_top,
    size,
)
from contracts import BinOp, Number, Op

SAMPLES = [
    Number(0),
    Number(-12),
    BinOp(Op.PLUS, Number(3), Number(0)),
    BinOp(Op.PLUS, Number(2), Number(2)),
    BinOp(Op.PLUS, Number(1), Number(1)),
    BinOp(Op.TIMES, Number(5), BinOp(Op.PLUS, Number(1), Number(0))),
    BinOp(Op.TIMES, BinOp(Op.DIV, Number(1), Number(0)), Number(0)),
    BinOp(Op.DIV, Number(5), Number(0)),
    BinOp(Op.DIV, Number(-7), Number(2)),
    BinOp(Op.MINUS, Number(1), BinOp(Op.MINUS, Number(2), Number(3))),
    BinOp(Op.DIV, BinOp(Op.TIMES, Number(1), Number(6)), BinOp(Op.PLUS, Number(2), Number(1))),
    BinOp(
        Op.PLUS,
        BinOp(Op.TIMES, BinOp(Op.PLUS, Number(4), Number(4)), Number(1)),
        BinOp(Op.TIMES, BinOp(Op.PLUS, Number(4), Number(4)), Number(1)),
    ),
    BinOp(
        Op.MINUS,
        BinOp(Op.TIMES, BinOp(Op.PLUS, Number(9), Number(0)), Number(1)),
        BinOp(Op.DIV, Number(8), BinOp(Op.MINUS, Number(3), Number(1))),
    ),
]


def test_demo_expression_formats_and_evaluates():
    expr = BinOp(Op.DIV, BinOp(Op.TIMES, Number(1), Number(6)), BinOp(Op.PLUS, Number(2), Number(1)))

    assert f"{format_expr(expr)} = {evaluate(expr)}" == "1 * 6 / (2 + 1) = 2"


def test_division_by_zero_yields_none():
    assert evaluate(BinOp(Op.DIV, Number(5), Number(0))) is None


@pytest.mark.parametrize("expr", SAMPLES)
def test_adding_zero_preserves_value(expr):
    value = evaluate(expr)
    if value is not None:
        assert evaluate(BinOp(Op.PLUS, expr, Number(0))) == value


@pytest.mark.parametrize("expr", SAMPLES)
def test_simplify_top_strips_added_zero(expr):
    assert simplify_top(BinOp(Op.PLUS, expr, Number(0))) == expr


@pytest.mark.parametrize("expr", SAMPLES)
def test_simplify_all_is_idempotent(expr):
    once = simplify_all(expr)

    assert simplify_all(once) == once


@pytest.mark.parametrize("expr", SAMPLES)
def test_simplify_top_is_stable_on_simplified_trees(expr):
    simplified = simplify_all(expr)

    assert simplify_top(simplified) == simplified


@pytest.mark.parametrize("expr", SAMPLES)
def test_simplifications_preserve_defined_values(expr):
    value = evaluate(expr)
    if value is None:
        pytest.skip("wartość niezdefiniowana")

    assert evaluate(simplify_top(expr)) == value
    assert evaluate(simplify_all(expr)) == value
    assert evaluate(fold_constants(expr)) == value


@pytest.mark.parametrize("expr", SAMPLES)
def test_simplify_all_never_grows_the_tree(expr):
    assert size(simplify_all(expr)) <= size(expr)
    assert depth(simplify_all(expr)) <= depth(expr) + 1


def test_depth_and_size():
    expr = BinOp(Op.PLUS, Number(3), BinOp(Op.TIMES, Number(4), Number(5)))

    assert depth(Number(1)) == 1
    assert size(Number(1)) == 1
    assert depth(expr) == 3
    assert size(expr) == 5
