"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from silverpy.lexer import LexerOptions, dump_tokens, tokenize
from silverpy.repl import run_repl

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="silverpy", description="Silver lexer tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--strings",
        action="store_true",
        help="Enable the quoted string literal rule",
    )
    subcommands = parser.add_subparsers(dest="command")
    subcommands.add_parser("repl", help="Lex lines read from standard input (default)")
    lex_parser = subcommands.add_parser("lex", help="Dump the tokens of a source file")
    lex_parser.add_argument("path", type=Path, help="Source file to lex")
    return parser


def _lex_file(path: Path, options: LexerOptions) -> int:
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("unable to read %s: %s", path, exc)
        return 2

    result = tokenize(source, options)
    dump_tokens(result.tokens, source, base_offset=options.base_offset)
    for diagnostic in result.diagnostics:
        print(f"{path}: {diagnostic}", file=sys.stderr)
    return 1 if result.has_errors else 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    options = LexerOptions()
    if args.strings:
        options = options.with_strings()

    if args.command == "lex":
        return _lex_file(args.path, options)
    return run_repl(sys.stdin, sys.stdout, options)
