import io
from pathlib import Path

import pytest

from silverpy.cli import main
from silverpy.lexer import LexerOptions
from silverpy.repl import BANNER, print_tokens, run_repl, unescape_line


def test_unescape_line() -> None:
    assert unescape_line("a\\nb\n") == "a\nb"
    assert unescape_line("no newline") == "no newline"


def test_repl_lexes_each_line_with_a_fresh_lexer() -> None:
    stdin = io.StringIO("one = 1\\nprint(one)\n  x\n")
    stdout = io.StringIO()

    assert run_repl(stdin, stdout) == 0

    output = stdout.getvalue()
    assert output.startswith(BANNER)
    assert "IDENTIFIER('one') (0, 3)" in output
    assert "NEWLINE (7, 8)" in output
    assert "IDENTIFIER('print') (8, 13)" in output
    # The second line starts over at offset 0 with its own indentation stack.
    assert "INDENT (0, 0)" in output
    assert "IDENTIFIER('x') (2, 3)" in output


def test_repl_reports_indentation_errors_and_continues() -> None:
    stdout = io.StringIO()

    run_repl(io.StringIO("a\\n    b\\n  c\nd\n"), stdout)

    output = stdout.getvalue()
    assert "LEXER_INCONSISTENT_INDENTATION" in output
    assert "IDENTIFIER('c')" in output
    assert "IDENTIFIER('d') (0, 1)" in output


def test_print_tokens_counts_errors() -> None:
    stdout = io.StringIO()

    assert print_tokens('x = "s"', stdout, LexerOptions().with_strings()) == 0
    assert "STRING_LITERAL('s') (4, 7)" in stdout.getvalue()
    assert print_tokens("a\n    b\n  c", io.StringIO()) == 1


def test_cli_lex_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "main.sv"
    path.write_text("x = 1\n", encoding="utf-8")

    assert main(["lex", str(path)]) == 0

    out = capsys.readouterr().out
    assert "IDENTIFIER" in out
    assert "INTEGER_LITERAL" in out
    assert out.splitlines()[0] == f"000 {'IDENTIFIER':<18} span=(0, 1) text='x'"
    assert "Diagnostics:" not in out


def test_cli_lex_file_with_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "bad.sv"
    path.write_text("a\n    b\n  c\n", encoding="utf-8")

    assert main(["lex", str(path)]) == 1
    assert "LEXER_INCONSISTENT_INDENTATION" in capsys.readouterr().err


def test_cli_lex_missing_file(tmp_path: Path) -> None:
    assert main(["lex", str(tmp_path / "missing.sv")]) == 2


def test_cli_strings_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "main.sv"
    path.write_text('print("hi")\n', encoding="utf-8")

    assert main(["--strings", "lex", str(path)]) == 0
    assert "STRING_LITERAL" in capsys.readouterr().out


def test_cli_defaults_to_repl(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))

    assert main([]) == 0
    assert "IDENTIFIER('x') (0, 1)" in capsys.readouterr().out
