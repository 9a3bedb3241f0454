from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

from fileprobe import cli


def test_cli_prints_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "script.py"
    sample.write_text("print('hi')\n", encoding="utf-8")

    exit_code = cli.main([str(sample), "--encoding", "utf-8"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert f"File Analysis: {sample}" in captured.out
    assert "File Type: Python" in captured.out
    assert "Character Analysis:" in captured.out
    assert "Word Matches:" not in captured.out


def test_cli_reports_missing_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "nope.txt"
    output = tmp_path / "out.txt"

    exit_code = cli.main([str(missing), str(output)])

    assert exit_code == 0
    assert capsys.readouterr().out == f"Error: File {missing} not found.\n"
    assert not output.exists()


def test_cli_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "story.txt"
    sample.write_text("The cat sat on the CAT's mat", encoding="utf-8")
    output = tmp_path / "report.txt"
    output.write_text("stale", encoding="utf-8")

    exit_code = cli.main([str(sample), str(output), "cat", "mat", "--encoding", "utf-8"])

    assert exit_code == 0
    assert capsys.readouterr().out == f"Analysis saved to {output}\n"
    written = output.read_text(encoding="utf-8")
    assert "stale" not in written
    assert "  'cat': 2 occurrences" in written
    assert "  'mat': 1 occurrences" in written


def test_cli_dash_output_keeps_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "story.txt"
    sample.write_text("dog dog", encoding="utf-8")

    cli.main([str(sample), "-", "dog", "--encoding", "utf-8"])

    assert "  'dog': 2 occurrences" in capsys.readouterr().out
    assert not (tmp_path / "-").exists()


def test_cli_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "config.json"
    sample.write_text('{"key": "value"}', encoding="utf-8")

    exit_code = cli.main([str(sample), "--json", "--encoding", "utf-8"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["format"] == "JSON"
    assert payload["words"] is None


def test_cli_details_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "table.tsv"
    sample.write_text("a\tb\tc\n", encoding="utf-8")

    cli.main([str(sample), "--details", "--encoding", "utf-8"])

    out = capsys.readouterr().out
    assert "File Type: TSV" in out
    assert "  Plugin: tsv" in out


def test_cli_unwritable_output_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "story.txt"
    sample.write_text("hello", encoding="utf-8")
    output = tmp_path / "missing-dir" / "report.txt"

    exit_code = cli.main([str(sample), str(output), "--traceback"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert out.startswith("Error: ")
    assert "Traceback (most recent call last)" in out
    assert "FileNotFoundError" in out


def test_cli_unexpected_error_without_traceback(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    sample = tmp_path / "story.txt"
    sample.write_text("hello", encoding="utf-8")

    def explode(*_args: object, **_kwargs: object) -> str:
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr(cli, "render_text_report", explode)

    assert cli.main([str(sample)]) == 0
    assert capsys.readouterr().out == "Error: renderer exploded\n"


def test_cli_rejects_non_positive_top(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "story.txt"
    sample.write_text("hello", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(sample), "--top", "0"])

    assert exc.value.code == 2
    assert "--top must be a positive integer" in capsys.readouterr().err


def test_cli_rejects_unknown_encoding(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "story.txt"
    sample.write_text("hello", encoding="utf-8")

    with pytest.raises(SystemExit):
        cli.main([str(sample), "--encoding", "no-such-codec"])

    assert "unknown encoding" in capsys.readouterr().err


def test_cli_top_option_limits_characters(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    sample = tmp_path / "letters.txt"
    sample.write_text("abcdef", encoding="utf-8")

    cli.main([str(sample), "--top", "2", "--encoding", "utf-8"])

    out = capsys.readouterr().out
    assert "  'a': 1 occurrences" in out
    assert "  'b': 1 occurrences" in out
    assert "'c'" not in out


def test_cli_words_after_separator_may_start_with_dash(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    sample = tmp_path / "flags.txt"
    sample.write_text("run with -v or --verbose", encoding="utf-8")

    exit_code = cli.main([str(sample), "-", "--", "-v", "verbose"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "  '-v': 0 occurrences" in out
    assert "  'verbose': 1 occurrences" in out


def test_importing_main_module_does_not_run_cli() -> None:
    module = importlib.import_module("fileprobe.__main__")
    assert callable(module.console_main)
