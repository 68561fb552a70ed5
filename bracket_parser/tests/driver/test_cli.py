# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
import logging
import sys

import pytest

from bracket_parser.cli import main as cli_main


def _run_json(argv: list[str], capsys) -> tuple[int, dict]:
	rc = cli_main(argv + ["--json"])
	out = capsys.readouterr().out
	return rc, json.loads(out)


def test_cli_prints_parsed_tree(capsys) -> None:
	rc = cli_main(["text(a)"])
	captured = capsys.readouterr()
	assert rc == 0
	assert captured.out == "parsed: Tokens([ Text(text), Parenthesis(Text(a)), ])\n"
	assert captured.err == ""


def test_cli_reports_unclosed_offset(capsys) -> None:
	rc = cli_main(["text(aaa]test"])
	captured = capsys.readouterr()
	assert rc == 1
	assert captured.out == ""
	assert captured.err == "not close at: 4\n"


def test_cli_missing_argument_prints_usage(capsys) -> None:
	with pytest.raises(SystemExit) as excinfo:
		cli_main([])
	assert excinfo.value.code != 0
	assert "usage:" in capsys.readouterr().err


def test_cli_tree_output(capsys) -> None:
	rc = cli_main(["(x)", "--tree"])
	assert rc == 0
	assert capsys.readouterr().out.splitlines() == ["Parenthesis ()", "  Text 'x'"]


def test_cli_json_success(capsys) -> None:
	rc, payload = _run_json(["{a}"], capsys)
	assert rc == 0
	assert payload == {"exit_code": 0, "tree": {"kind": "curly", "inner": {"kind": "text", "content": "a"}}}


def test_cli_json_nested_error_carries_both_offsets(capsys) -> None:
	rc, payload = _run_json(["ab(c[d)"], capsys)
	assert rc == 1
	assert payload["exit_code"] == 1
	(diag,) = payload["diagnostics"]
	assert diag["phase"] == "parser"
	assert diag["code"] == "E-UNCLOSED-BRACKET"
	assert diag["offset"] == 1
	assert diag["position"] == 4
	assert diag["notes"] == ["absolute position in input: 4"]


def test_cli_max_depth(capsys) -> None:
	rc = cli_main(["((a))", "--max-depth", "1"])
	assert rc == 1
	assert capsys.readouterr().err == "nesting too deep at: 0 (max depth 1)\n"


def test_cli_rejects_negative_max_depth(capsys) -> None:
	with pytest.raises(SystemExit) as excinfo:
		cli_main(["a", "--max-depth", "-1"])
	assert excinfo.value.code == 2
	assert "--max-depth" in capsys.readouterr().err


def test_cli_verbose_logs_to_stderr(capsys) -> None:
	try:
		rc = cli_main(["a(b)", "-v"])
		captured = capsys.readouterr()
		assert rc == 0
		assert "parse: 4 chars" in captured.err
	finally:
		logging.getLogger("bracket_parser").setLevel(logging.WARNING)


def test_cli_huge_max_depth_still_exits_cleanly(capsys) -> None:
	depth = sys.getrecursionlimit() * 2
	rc = cli_main(["(" * depth + ")" * depth, "--max-depth", str(depth * 10)])
	captured = capsys.readouterr()
	assert rc == 1
	assert captured.out == ""
	assert captured.err.startswith("nesting too deep at: 0 (max depth ")


def test_cli_json_nesting_error_code(capsys) -> None:
	rc, payload = _run_json(["((a))", "--max-depth", "1"], capsys)
	assert rc == 1
	(diag,) = payload["diagnostics"]
	assert diag["code"] == "E-NESTING-DEPTH"
	assert diag["offset"] == 0
	assert diag["position"] == 1
	assert diag["notes"] == ["absolute position in input: 1"]
