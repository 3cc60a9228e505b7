"""Crossings of hailstone paths in the x-y plane."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

TEST_AREA_MIN = 200000000000000.0
TEST_AREA_MAX = 400000000000000.0

Vector = tuple[int, int, int]


@dataclass(frozen=True)
class Hailstone:
    """A hailstone's position at time zero and its velocity per time unit."""

    position: Vector
    velocity: Vector


def _vector(text: str, line: str) -> Vector:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise ValueError(f"not a hailstone line: {line!r}")
    x, y, z = (int(p) for p in parts)
    return x, y, z


def parse_hailstones(text: str) -> list[Hailstone]:
    """Parse ``px, py, pz @ vx, vy, vz`` lines."""
    hailstones = []
    for line in text.rstrip().splitlines():
        pos_str, sep, vel_str = line.partition("@")
        if not sep:
            raise ValueError(f"not a hailstone line: {line!r}")
        hailstones.append(Hailstone(_vector(pos_str, line), _vector(vel_str, line)))
    return hailstones


def path_intersection(
    h1: Hailstone, h2: Hailstone
) -> tuple[float, float, float, float] | None:
    """Where the x-y paths cross, as (x, y, t1, t2), or ``None`` if they are parallel.

    ``t1`` and ``t2`` are the times at which each hailstone reaches the crossing.
    """
    (px1, py1, _), (vx1, vy1, _) = h1.position, h1.velocity
    (px2, py2, _), (vx2, vy2, _) = h2.position, h2.velocity
    if vx1 == 0 or vx2 == 0:
        raise ValueError("hailstones must move along x")
    slope1 = vy1 / vx1
    slope2 = vy2 / vx2
    if slope1 == slope2:
        return None
    intercept1 = py1 - slope1 * px1
    intercept2 = py2 - slope2 * px2
    x = (intercept1 - intercept2) / (slope2 - slope1)
    y = intercept1 + slope1 * x
    return x, y, (x - px1) / vx1, (x - px2) / vx2


def _crossing_inside(
    h1: Hailstone, h2: Hailstone, low: float, high: float
) -> bool:
    crossing = path_intersection(h1, h2)
    if crossing is None:
        return False
    x, y, t1, t2 = crossing
    return t1 > 0 and t2 > 0 and low <= x <= high and low <= y <= high


def count_crossings(
    hailstones: Sequence[Hailstone],
    low: float = TEST_AREA_MIN,
    high: float = TEST_AREA_MAX,
) -> int:
    """Pairs whose future paths cross within the square ``low``..``high``."""
    return sum(
        _crossing_inside(h1, h2, low, high)
        for i, h1 in enumerate(hailstones)
        for h2 in hailstones[i + 1:]
    )


def main(argv: list[str] | None = None) -> None:
    """Report the path crossings for a file of hailstones."""
    parser = argparse.ArgumentParser(description="Hailstone path crossings.")
    parser.add_argument("file", nargs="?", default="input.txt")
    parser.add_argument("--low", type=float, default=TEST_AREA_MIN)
    parser.add_argument("--high", type=float, default=TEST_AREA_MAX)
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    try:
        hailstones = parse_hailstones(content)
        n_pairs = 0
        for i, h1 in enumerate(hailstones):
            for j in range(i + 1, len(hailstones)):
                crossing = path_intersection(h1, hailstones[j])
                if crossing is None:
                    print(f"hailstones {i} and {j} never intersect")
                    continue
                x, y, t1, t2 = crossing
                print(f"hailstones {i} and {j} intersect at ({x},{y})... ", end="")
                if t1 <= 0 or t2 <= 0:
                    print(f"in the past: t1 = {t1}, t2 = {t2}")
                elif args.low <= x <= args.high and args.low <= y <= args.high:
                    print("INSIDE TEST AREA")
                    n_pairs += 1
                else:
                    print("outside test area")
        print(f"#pairs inside test area = {n_pairs}")
    except ValueError as err:
        print(f"ERROR: {err}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()