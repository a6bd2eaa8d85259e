#!/usr/bin/env python3
"""
arithmos.py — CLI narzędzie Arithmos.

Działa całkowicie lokalnie. Wyrażenia nie są parsowane z tekstu —
`show` przyjmuje AST w jego własnej postaci JSON (model_dump_json()).

Konfiguracja: zmienne środowiskowe z prefiksem ARITHMOS_ lub plik .env
(np. ARITHMOS_UNDEFINED_POLICY=ieee, ARITHMOS_LOG_LEVEL=DEBUG).

Podkomendy:
    demo  — przykładowe wyrażenia: "format = wartość" + tabela uproszczeń
    show  — raport dla jednego AST (JSON z --json, --file lub stdin)

Użycie:
    python arithmos.py demo
    python arithmos.py show --file expr.json --steps
    echo '{"node_type": "number", "value": 3}' | python arithmos.py show
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.ast_evaluator import ASTEvaluator
from arithmos_core import analyze
from config import Settings
from contracts import BinOp, ExprAST, Number, Op, parse_expr_json

logger = logging.getLogger("arithmos.cli")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value).replace("→", "->")
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _show_value(
    value: Optional[int],
    expr: ExprAST,
    settings: Settings,
    evaluator: ASTEvaluator,
) -> str:
    if value is not None:
        return str(value)
    if settings.undefined_policy == "ieee":
        return str(evaluator.eval_with_policy(expr))
    return "undefined"


def _read_json(args: argparse.Namespace) -> str:
    if args.json:
        return args.json
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


# -- przykłady -------------------------------------------------------------

DEMO_EXPRESSIONS: list[ExprAST] = [
    BinOp(Op.DIV, BinOp(Op.TIMES, Number(1), Number(6)), BinOp(Op.PLUS, Number(2), Number(1))),
    BinOp(Op.PLUS, Number(3), BinOp(Op.TIMES, Number(4), Number(5))),
    BinOp(Op.TIMES, BinOp(Op.PLUS, Number(3), Number(4)), Number(5)),
    BinOp(Op.MINUS, Number(1), BinOp(Op.MINUS, Number(2), Number(3))),
    BinOp(Op.DIV, Number(-7), Number(2)),
    BinOp(Op.DIV, Number(5), Number(0)),
]

DEMO_SIMPLIFICATIONS: list[ExprAST] = [
    BinOp(Op.PLUS, Number(3), Number(0)),
    BinOp(Op.TIMES, BinOp(Op.MINUS, Number(7), Number(2)), Number(1)),
    BinOp(Op.TIMES, BinOp(Op.DIV, Number(1), Number(0)), Number(0)),
    BinOp(Op.PLUS, Number(2), Number(2)),
    BinOp(Op.PLUS, BinOp(Op.PLUS, Number(4), Number(0)), BinOp(Op.PLUS, Number(4), Number(0))),
]


# -- podkomendy ------------------------------------------------------------

def _demo(args: argparse.Namespace, settings: Settings) -> None:
    evaluator = ASTEvaluator(record_steps=settings.record_steps)
    for expr in DEMO_EXPRESSIONS:
        report = analyze(expr, evaluator=evaluator)
        shown = _show_value(report.value, expr, settings, evaluator)
        print(f"{report.formatted} = {shown}")

    table = Table(title="Uproszczenia", box=box.ASCII, show_lines=False)
    table.add_column("Wyrażenie")
    table.add_column("simplify_top")
    table.add_column("simplify_all")
    for expr in DEMO_SIMPLIFICATIONS:
        report = analyze(expr, evaluator=evaluator)
        table.add_row(
            _safe_terminal_text(report.formatted),
            _safe_terminal_text(repr(report.simplified_top)),
            _safe_terminal_text(repr(report.simplified_all)),
        )
    _console().print(table)


def _show(args: argparse.Namespace, settings: Settings) -> None:
    raw = _read_json(args).strip()
    if not raw:
        print("Błąd: podaj AST przez --json, --file lub stdin", file=sys.stderr)
        sys.exit(1)
    try:
        expr = parse_expr_json(raw)
    except ValidationError as exc:
        logger.debug("Niepoprawny JSON AST: %s", exc)
        print(f"Błąd: niepoprawny AST ({exc.error_count()} błędów walidacji)", file=sys.stderr)
        sys.exit(1)

    evaluator = ASTEvaluator(record_steps=settings.record_steps)
    report = analyze(expr, evaluator=evaluator)
    rows: list[tuple[str, Any]] = [
        ("formatted", report.formatted),
        ("value", _show_value(report.value, expr, settings, evaluator)),
        ("simplify_top", repr(report.simplified_top)),
        ("simplify_all", repr(report.simplified_all)),
        ("folded", repr(report.folded)),
        ("depth", report.depth),
        ("size", report.size),
    ]
    _print_kv_table("Wyrażenie", rows)

    if args.steps:
        for i, step in enumerate(report.steps, 1):
            print(f"  [{i}] {step}")


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = argparse.ArgumentParser(
        prog="arithmos",
        description=f"{settings.app_title} {settings.app_version} — wyrażenia arytmetyczne na AST",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # demo
    sub.add_parser("demo", help="Pokaż przykładowe wyrażenia i uproszczenia")

    # show
    p = sub.add_parser("show", help="Raport dla AST podanego jako JSON")
    p.add_argument("--json", "-j", help="AST jako JSON")
    p.add_argument("--file", "-f", help="Ścieżka do pliku z AST w JSON")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Wyświetl kroki obliczeń")

    args = parser.parse_args(argv)

    commands = {
        "demo": _demo,
        "show": _show,
    }
    commands[args.command](args, settings)


if __name__ == "__main__":
    main()
