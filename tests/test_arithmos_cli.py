from __future__ import annotations

import pytest

from arithmos import main
from config import Settings
from contracts import BinOp, Number, Op


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("ARITHMOS_UNDEFINED_POLICY", "ARITHMOS_RECORD_STEPS", "ARITHMOS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    settings = Settings()

    assert settings.record_steps is True
    assert settings.undefined_policy == "none"
    assert settings.log_level == "INFO"


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("ARITHMOS_UNDEFINED_POLICY", "ieee")
    monkeypatch.setenv("ARITHMOS_RECORD_STEPS", "false")

    settings = Settings()

    assert settings.undefined_policy == "ieee"
    assert settings.record_steps is False


def test_demo_prints_formatted_expressions_with_values(capsys):
    main(["demo"])

    out = capsys.readouterr().out
    assert "1 * 6 / (2 + 1) = 2\n" in out
    assert "3 + 4 * 5 = 23\n" in out
    assert "(3 + 4) * 5 = 35\n" in out
    assert "-7 / 2 = -3\n" in out
    assert "5 / 0 = undefined\n" in out


def test_demo_uses_ieee_policy_when_configured(monkeypatch, capsys):
    monkeypatch.setenv("ARITHMOS_UNDEFINED_POLICY", "ieee")

    main(["demo"])

    assert "5 / 0 = inf\n" in capsys.readouterr().out


def test_show_reports_expression_from_json(capsys):
    expr = BinOp(Op.PLUS, BinOp(Op.TIMES, Number(3), Number(1)), Number(0))

    main(["show", "--json", expr.model_dump_json(), "--steps"])

    out = capsys.readouterr().out
    assert "3 * 1 + 0" in out
    assert "[1] 3 * 1 = 3" in out
    assert "[2] 3 + 0 = 3" in out


def test_show_reads_ast_from_file(tmp_path, capsys):
    path = tmp_path / "expr.json"
    path.write_text(BinOp(Op.DIV, Number(9), Number(0)).model_dump_json(), encoding="utf-8")

    main(["show", "--file", str(path)])

    out = capsys.readouterr().out
    assert "9 / 0" in out
    assert "undefined" in out


def test_show_rejects_invalid_ast(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["show", "--json", '{"node_type": "binop", "op": "Pow"}'])

    assert exc.value.code == 1
    assert "Błąd" in capsys.readouterr().err
