#!/usr/bin/env python
import argparse
from pathlib import Path

from silverpy.lexer import LexerOptions, Token, token_text, tokenize


def format_token(idx: int, token: Token, source: str) -> str:
    base = (
        f"[{idx}] kind={token.kind.name} "
        f"text={token_text(source, token)!r} "
        f"span=({token.span.start},{token.span.end})"
    )
    if token.text is not None:
        return base + f" value={token.text!r}"
    return base


def main() -> None:
    parser = argparse.ArgumentParser(description="Write the token stream of a source file")
    parser.add_argument("input", type=Path)
    parser.add_argument("--output", type=Path, default=None)
    parser.add_argument("--strings", action="store_true", help="Enable string literals")
    args = parser.parse_args()

    input_path: Path = args.input
    output_path: Path = args.output or Path("out") / f"{input_path.stem}_tokens.txt"

    text = input_path.read_text(encoding="utf-8")
    options = LexerOptions().with_strings() if args.strings else LexerOptions()
    result = tokenize(text, options)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(result.tokens):
            f.write(format_token(idx, token, text) + "\n")
        for diagnostic in result.diagnostics:
            f.write(f"# {diagnostic}\n")

    print(f"Wrote {len(result.tokens)} tokens to {output_path}")


if __name__ == "__main__":
    main()
