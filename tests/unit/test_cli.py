"""Unit tests for the command-line entry point."""

import io
import os
import subprocess
import sys
from pathlib import Path

import main

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run_cli(*args, env_extra=None, stdin=""):
    env = {**os.environ, **(env_extra or {})}
    return subprocess.run(
        [sys.executable, "main.py", *args],
        input=stdin,
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env=env,
        timeout=60,
    )


def test_convert_file(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<h1>Title</h1>", encoding="utf-8")
    assert main.main([str(page)]) == 0
    assert capsys.readouterr().out == "# Title\n"


def test_convert_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("<ul><li>A</li></ul>"))
    assert main.main([]) == 0
    assert capsys.readouterr().out == "- A\n"


def test_option_flags(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<ul><li>A</li></ul><p><em>x</em></p>", encoding="utf-8")
    assert main.main(["--bullet", "+", "--em", "_", str(page)]) == 0
    assert capsys.readouterr().out == "+ A\n\n_x_\n"


def test_max_chars(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("<p>Hello world</p>"))
    assert main.main(["--max-chars", "5"]) == 0
    assert capsys.readouterr().out == "Hello\n"


def test_validate_failure_exit_code(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("<p>Tiny</p>"))
    assert main.main(["--validate", "-"]) == 2
    captured = capsys.readouterr()
    assert captured.out == "Tiny\n"
    assert "too short" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.html")]) == 1
    assert "Cannot read" in capsys.readouterr().err


def test_interactive_mode(monkeypatch, capsys):
    lines = iter(["<h1>Hi</h1>", "", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main.main(["-i"]) == 0
    out = capsys.readouterr().out
    assert "# Hi" in out
    assert "Goodbye." in out


def test_warnings_stay_out_of_markdown_output():
    result = _run_cli("-", env_extra={"PAGEMD_EM_DELIMITER": "x"}, stdin="<h1>T</h1>")
    assert result.returncode == 0
    assert result.stdout == "# T\n"
    assert "Unsupported em_delimiter" in result.stderr


def test_verbose_logs_go_to_stderr():
    result = _run_cli("-v", "-", stdin="<h1>T</h1>")
    assert result.returncode == 0
    assert result.stdout == "# T\n"
    assert "DEBUG" in result.stderr
