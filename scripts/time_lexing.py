#!/usr/bin/env python3
"""Quick perf benchmark for lexing a project tree."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from silverpy.lexer import tokenize


def _collect_source_files(root: Path, suffix: str) -> list[Path]:
    files = sorted(root.rglob(f"*{suffix}"))
    return [path for path in files if path.is_file()]


def _run_once(
    sources: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for source in iterator:
        result = tokenize(source)
        total_tokens += len(result.tokens)
        total_diagnostics += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_tokens, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark lexer throughput")
    parser.add_argument("root", type=Path, help="Directory of source files to lex")
    parser.add_argument("--suffix", default=".sv", help="Source file suffix (default: .sv)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_source_files(root, args.suffix)
    if not files:
        raise SystemExit(f"No *{args.suffix} files found under {root}")
    # Read up front so the timings cover lexing only.
    sources = [path.read_text(encoding="utf-8") for path in files]

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(sources, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

        timings: list[float] = []
        tokens_count = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, tokens_count, diagnostics_count = _run_once(
                sources,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, tokens_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, tokens_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, tokens_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Tokens: {tokens_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
