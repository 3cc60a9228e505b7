"""The one rock throw that hits every hailstone."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from fractions import Fraction

from .hail_paths import Hailstone, parse_hailstones

_NEEDED = 4


def _whole(value: Fraction) -> int | Fraction:
    return value.numerator if value.denominator == 1 else value


def _plane_time(a: Fraction, b: Fraction, pos: list[Fraction], vel: list[Fraction]) -> Fraction:
    px, py, pz = pos
    vx, vy, vz = vel
    return (pz - a * px - b * py) / (a * vx + b * vy - vz)


def rock_trajectory(hailstones: Sequence[Hailstone]) -> Hailstone:
    """The rock's start position and velocity, found from the first four hailstones.

    Working relative to the first hailstone, the rock must lie in the plane
    through the origin and the second hailstone's path; the third and fourth
    hailstones cross that plane where the rock hits them.
    """
    if len(hailstones) < _NEEDED:
        raise ValueError(f"need at least {_NEEDED} hailstones")
    h0 = hailstones[0]
    relative = [
        (
            [Fraction(p - o) for p, o in zip(h.position, h0.position)],
            [Fraction(v - o) for v, o in zip(h.velocity, h0.velocity)],
        )
        for h in hailstones[1:_NEEDED]
    ]
    (p1, v1), (p2, v2), (p3, v3) = relative
    try:
        x_rel = (p1[0] + v1[0]) / p1[0]
        b = (p1[2] + v1[2] - p1[2] * x_rel) / (p1[1] + v1[1] - p1[1] * x_rel)
        a = (p1[2] - b * p1[1]) / p1[0]
        t2 = _plane_time(a, b, p2, v2)
        t3 = _plane_time(a, b, p3, v3)
        hit2 = [p + t2 * v for p, v in zip(p2, v2)]
        hit3 = [p + t3 * v for p, v in zip(p3, v3)]
        velocity = [(c3 - c2) / (t3 - t2) for c2, c3 in zip(hit2, hit3)]
    except ZeroDivisionError as err:
        raise ValueError("hailstones are too aligned to fix the rock's path") from err
    position = [c - v * t2 for c, v in zip(hit2, velocity)]
    return Hailstone(
        tuple(_whole(c + o) for c, o in zip(position, h0.position)),
        tuple(_whole(v + o) for v, o in zip(velocity, h0.velocity)),
    )


def position_sum(text: str) -> int | Fraction:
    """Sum of the rock's starting coordinates; only the first four lines are read."""
    lines = text.rstrip().splitlines()[:_NEEDED]
    rock = rock_trajectory(parse_hailstones("\n".join(lines)))
    return _whole(Fraction(sum(rock.position)))


def main(argv: list[str] | None = None) -> None:
    """Print the rock throw for a file of hailstones."""
    parser = argparse.ArgumentParser(description="Rock throw.")
    parser.add_argument("file", nargs="?", default="input.txt")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    try:
        lines = content.rstrip().splitlines()[:_NEEDED]
        rock = rock_trajectory(parse_hailstones("\n".join(lines)))
        px, py, pz = rock.position
        vx, vy, vz = rock.velocity
        print(f"Rock: {px}, {py}, {pz} @ {vx}, {vy}, {vz}")
        print(f"Sum of rock position coords = {_whole(Fraction(px + py + pz))}")
    except ValueError as err:
        print(f"ERROR: {err}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()