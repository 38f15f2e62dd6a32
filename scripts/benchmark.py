#!/usr/bin/env python
"""Benchmark utf16_reader: per-size decode speed and peak memory.

Decodes generated small, medium and large UTF-16 inputs and compares the
timing with Python's built-in ``utf-16`` codec.  Can be run standalone for
human-readable output, or with ``--json-only`` for machine-readable JSON.
"""

from __future__ import annotations

import argparse
import io
import json
import statistics
import sys
import time
import tracemalloc

import utf16_reader

_LINE = "The quick brown fox jumps over the lazy dog. Привет, мир \U0001f600\n"

#: Number of lines in each generated sample.
_SIZES: dict[str, int] = {"small": 1, "medium": 500, "large": 20_000}


def _format_bytes(n: int) -> str:
    """Format byte count as human-readable string."""
    if n >= 1 << 20:
        return f"{n / (1 << 20):.1f} MiB"
    if n >= 1 << 10:
        return f"{n / (1 << 10):.1f} KiB"
    return f"{n} B"


def _time_calls(func, data: bytes, repeat: int) -> list[float]:
    timings = []
    for _ in range(repeat):
        start = time.perf_counter()
        func(data)
        timings.append(time.perf_counter() - start)
    return timings


def _reader_decode(data: bytes, chunk_size: int) -> str:
    return utf16_reader.decode(io.BytesIO(data), chunk_size=chunk_size)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark utf16_reader.")
    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Timed runs per sample (default: 5)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=8192,
        help="Bytes requested per read() call (default: 8192)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()

    results: dict[str, dict[str, float | int]] = {}
    for label, lines in _SIZES.items():
        text = _LINE * lines
        data = b"\xff\xfe" + text.encode("utf-16-le")
        if _reader_decode(data, args.chunk_size) != text:
            print(f"ERROR: {label} sample did not round-trip", file=sys.stderr)
            sys.exit(1)

        ours = _time_calls(
            lambda d: _reader_decode(d, args.chunk_size), data, args.repeat
        )
        builtin = _time_calls(lambda d: d.decode("utf-16"), data, args.repeat)

        tracemalloc.start()
        _reader_decode(data, args.chunk_size)
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        results[label] = {
            "bytes": len(data),
            "median_ms": statistics.median(ours) * 1000,
            "builtin_median_ms": statistics.median(builtin) * 1000,
            "peak_memory": peak,
        }

    if args.json_only:
        print(json.dumps(results, indent=2))
        return

    print(f"utf16_reader {utf16_reader.__version__}  chunk_size={args.chunk_size}")
    print(f"{'sample':<8} {'input':>10} {'median':>12} {'builtin':>12} {'peak mem':>10}")
    for label, r in results.items():
        print(
            f"{label:<8} {_format_bytes(int(r['bytes'])):>10} "
            f"{r['median_ms']:>10.2f}ms {r['builtin_median_ms']:>10.2f}ms "
            f"{_format_bytes(int(r['peak_memory'])):>10}"
        )


if __name__ == "__main__":
    main()
