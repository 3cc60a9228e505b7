"""Extrapolating sequences forwards and backwards by repeated differences."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence


def predict(sequence: Sequence[int]) -> tuple[int, int]:
    """The values just before and just after ``sequence``."""
    rows = [list(sequence)]
    while not all(v == 0 for v in rows[-1]):
        row = rows[-1]
        rows.append([b - a for a, b in zip(row, row[1:])])
    prev = nxt = 0
    for row in reversed(rows[:-1]):
        prev = row[0] - prev
        nxt = row[-1] + nxt
    return prev, nxt


def _sequences(text: str):
    for line in text.splitlines():
        if line:
            yield line, [int(s) for s in line.split()]


def extrapolation_sums(text: str) -> tuple[int, int]:
    """Sums of the previous and of the next values over all lines."""
    sum_prev = sum_next = 0
    for _, sequence in _sequences(text):
        prev, nxt = predict(sequence)
        sum_prev += prev
        sum_next += nxt
    return sum_prev, sum_next


def main(argv: list[str] | None = None) -> None:
    """Print the extrapolated sums for a file of sequences."""
    parser = argparse.ArgumentParser(description="Mirage maintenance.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    sum_prev = sum_next = 0
    for line, sequence in _sequences(content):
        prev, nxt = predict(sequence)
        print(f"{prev} <= [{line}] => {nxt}")
        sum_prev += prev
        sum_next += nxt
    print(f"sum prev (part 2) = {sum_prev}, sum next (part 1) = {sum_next}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()