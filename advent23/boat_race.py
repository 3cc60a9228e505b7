"""Toy boat races: how many button hold times beat the record."""

from __future__ import annotations

import argparse
import math
import sys
import time


def ways_to_win(race_time: float, record: float) -> int:
    """Count whole hold times whose distance strictly beats ``record``.

    The distance is ``hold * (race_time - hold)``; the winning holds lie
    strictly between the roots of ``hold**2 - race_time*hold + record``.
    """
    discriminant = race_time * race_time - 4 * record
    if discriminant < 0:
        raise ValueError(f"record {record} cannot be reached in time {race_time}")
    c = math.sqrt(discriminant)
    low = (race_time - c) / 2
    high = (race_time + c) / 2
    first = low + 1 if float(low).is_integer() else math.ceil(low)
    last = high - 1 if float(high).is_integer() else math.floor(high)
    return int(last - first + 1)


def _numbers(line: str) -> list[float]:
    return [float(s) for s in line.split()[1:]]


def _races(text: str) -> list[tuple[float, float]]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return list(zip(_numbers(lines[0]), _numbers(lines[1])))


def product_of_ways(text: str) -> int:
    """Multiply the number of ways to win each race in the sheet."""
    return math.prod(ways_to_win(t, d) for t, d in _races(text))


def main(argv: list[str] | None = None) -> None:
    """Print the product of ways to win for a race sheet."""
    parser = argparse.ArgumentParser(description="Boat races.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    product = 1
    for race_time, record in _races(content):
        ways = ways_to_win(race_time, record)
        print(f"race_time == {race_time:g}, record_dist == {record:g}; ways to win = {ways}")
        product *= ways
    print(f"product = {product}")
    print(f"Time: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()