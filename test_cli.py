#!/usr/bin/env python3
"""
CLI 테스트: arith-eval / arith-batch
"""

import json

import pandas as pd
import pytest

from arith_notation.scripts import cli_batch, cli_eval


def test_eval_prefix(capsys):
    rc = cli_eval.main(["+", "3", "4"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "value: 7" in out
    assert "postfix: 3 4 +" in out
    assert "infix: ( 3 + 4 )" in out


def test_eval_postfix_with_negative_operands(capsys):
    rc = cli_eval.main(["--notation", "postfix", "--to", "prefix", "-5", "3", "-"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "value: -8" in out
    assert "prefix: - -5 3" in out
    assert "infix" not in out


def test_eval_invalid(capsys):
    rc = cli_eval.main(["3", "4", "+"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "invalid prefix expression" in out


def test_eval_division_by_zero_writes_json(tmp_path, capsys):
    rc = cli_eval.main(["--outdir", str(tmp_path), "/", "6", "0"])
    assert rc == 1
    with open(tmp_path / "result.json") as f:
        data = json.load(f)
    assert data["valid"] is True
    assert data["value"] is None
    assert data["error"] == "division_by_zero"
    assert data["conversions"]["postfix"] == ["6", "0", "/"]
    assert "division_by_zero" in capsys.readouterr().out


def test_eval_no_wrap(capsys):
    assert cli_eval.main(["+", "2147483647", "1"]) == 0
    assert "value: -2147483648" in capsys.readouterr().out
    assert cli_eval.main(["--no_wrap", "+", "2147483647", "1"]) == 1


def test_batch(tmp_path, capsys):
    src = tmp_path / "exprs.json"
    src.write_text(json.dumps([["1", "2", "+"], ["5"], ["1", "0", "/"], ["+"]]))
    out_csv = tmp_path / "report.csv"
    summary = tmp_path / "summary.json"
    rc = cli_batch.main(["--input", str(src), "--notation", "postfix",
                         "--out", str(out_csv), "--summary", str(summary)])
    assert rc == 0
    df = pd.read_csv(out_csv)
    assert len(df) == 4
    assert df["valid"].tolist() == [True, True, True, False]
    stats = json.loads(summary.read_text())
    assert stats["valid"] == 3
    assert stats["errors"]["structural"] == 1
    assert "4 expressions: 3 valid, 1 invalid" in capsys.readouterr().out


def test_batch_bad_input(tmp_path):
    src = tmp_path / "bad.json"
    src.write_text(json.dumps({"not": "a list"}))
    assert cli_batch.main(["--input", str(src), "--out", str(tmp_path / "r.csv")]) == 1
    assert cli_batch.main(["--input", str(tmp_path / "missing.json")]) == 1


def test_batch_rejects_non_string_tokens(tmp_path):
    src = tmp_path / "numbers.json"
    src.write_text(json.dumps([["+", 3, 4]]))
    out_csv = tmp_path / "r.csv"
    assert cli_batch.main(["--input", str(src), "--out", str(out_csv)]) == 1
    assert not out_csv.exists()
    with pytest.raises(ValueError):
        cli_batch.load_expressions(src)

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
