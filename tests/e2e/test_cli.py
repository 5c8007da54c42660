"""End-to-end tests for the fishtail command line."""

import json

from click.testing import CliRunner

from fishtail.__main__ import main

SIMPLE = "graph LR\n  a --> b\n"
CYCLIC = "graph LR\n  a --> b --> c --> a\n  c --> d\n"
UNSUPPORTED = "sequenceDiagram\n  Alice ->> Bob: Hello\n"


def test_stdin_to_json():
    result = CliRunner().invoke(main, [], input=SIMPLE)
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [n["data"]["id"] for n in data["nodes"]] == ["a", "b"]
    assert data["edges"][0]["data"]["id"] == "a__b"


def test_file_input(tmp_path):
    src = tmp_path / "deps.mmd"
    src.write_text(SIMPLE, encoding="utf-8")
    result = CliRunner().invoke(main, [str(src), "--indent", "2"])
    assert result.exit_code == 0
    assert '\n  "direction": "LR"' in result.output


def test_output_file(tmp_path):
    src = tmp_path / "deps.mmd"
    src.write_text(SIMPLE, encoding="utf-8")
    out = tmp_path / "deps.json"
    result = CliRunner().invoke(main, [str(src), "-o", str(out)])
    assert result.exit_code == 0
    assert result.output == ""
    assert json.loads(out.read_text(encoding="utf-8"))["direction"] == "LR"


def test_cycles_listing():
    result = CliRunner().invoke(main, ["--cycles"], input=CYCLIC)
    assert result.exit_code == 0
    assert result.output == "a → b → c → a\n"


def test_no_cycles_listing():
    result = CliRunner().invoke(main, ["--cycles"], input=SIMPLE)
    assert result.exit_code == 0
    assert result.output == "No cycles\n"


def test_unsupported_diagram_exits_1():
    result = CliRunner().invoke(main, [], input=UNSUPPORTED)
    assert result.exit_code == 1
    assert "sequenceDiagram" in result.output


def test_missing_file(tmp_path):
    missing = tmp_path / "does-not-exist.mmd"
    result = CliRunner().invoke(main, [str(missing)])
    assert result.exit_code == 1
    assert f"Error: file not found: {missing}" in result.output


def test_file_not_utf8(tmp_path):
    src = tmp_path / "bad.mmd"
    src.write_bytes(b"graph LR\n  a --> b\xff\n")
    result = CliRunner().invoke(main, [str(src)])
    assert result.exit_code == 1
    assert "Error: cannot read" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_stdin_not_utf8():
    result = CliRunner().invoke(main, [], input=b"graph LR\n  a --> b\xff\n")
    assert result.exit_code == 1
    assert "Error: cannot read stdin" in result.output
