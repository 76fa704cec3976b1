"""Line-at-a-time lexer REPL."""

from __future__ import annotations

from typing import TextIO

from silverpy.lexer import Lexer, LexerOptions, LexError

BANNER = "Silver lexer output"
PROMPT = "> "


def unescape_line(line: str) -> str:
    """Drop the line terminator and turn the two characters `\\n` into newlines."""
    if line.endswith("\n"):
        line = line[:-1]
    return line.replace("\\n", "\n")


def print_tokens(source: str, stdout: TextIO, options: LexerOptions | None = None) -> int:
    """Lex `source` with a fresh lexer and print every token; returns the error count."""
    lexer = Lexer(source, options)
    errors = 0
    while True:
        try:
            token = lexer.next_token()
        except LexError as error:
            errors += 1
            print(error.to_diagnostic(), file=stdout)
            continue
        if token is None:
            return errors
        print(token, file=stdout)


def run_repl(stdin: TextIO, stdout: TextIO, options: LexerOptions | None = None) -> int:
    print(BANNER, file=stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return 0
        print_tokens(unescape_line(line), stdout, options)
