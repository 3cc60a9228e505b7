"""Chain reactions of falling bricks, counted by support graph or by re-simulation."""

from __future__ import annotations

import argparse
import heapq
import sys
import time
from collections.abc import Sequence
from dataclasses import replace

from .sand_slabs import Brick, parse_bricks, settle


def _cells(brick: Brick) -> list[tuple[int, int]]:
    return [
        (x, y)
        for x in range(brick.x1, brick.x2 + 1)
        for y in range(brick.y1, brick.y2 + 1)
    ]


def fall(bricks: Sequence[Brick], except_index: int | None = None) -> list[Brick]:
    """Drop the bricks in the order given, leaving out the one at ``except_index``.

    The bricks should be ordered lowest first. The left-out brick is returned
    unchanged in its place so that indices still line up.
    """
    tops: dict[tuple[int, int], int] = {}
    result = []
    for i, brick in enumerate(bricks):
        if i == except_index:
            result.append(brick)
            continue
        cells = _cells(brick)
        base = 1 + max((tops.get(cell, 0) for cell in cells), default=0)
        landed = replace(brick, z1=base, z2=base + brick.z2 - brick.z1)
        for cell in cells:
            tops[cell] = landed.z2
        result.append(landed)
    return result


def _chain_counts(text: str) -> list[int]:
    """For each settled brick, how many others fall when it is removed."""
    _, support = settle(parse_bricks(text))
    counts = []
    for removed in range(len(support.below)):
        below = [set(s) for s in support.below]
        pending = [removed]
        n_fall = 0
        while pending:
            j = heapq.heappop(pending)
            for k in support.above[j]:
                below[k].discard(j)
                if not below[k]:
                    n_fall += 1
                    heapq.heappush(pending, k)
        counts.append(n_fall)
    return counts


def chain_reaction_total(text: str) -> int:
    """Sum, over every brick, of the number of other bricks that fall when it goes."""
    return sum(_chain_counts(text))


def _moved_counts(text: str) -> list[int]:
    bricks = sorted(parse_bricks(text))
    normal = fall(bricks)
    counts = []
    for missing in range(len(bricks)):
        test = fall(bricks, missing)
        counts.append(
            sum(
                1
                for j, (before, after) in enumerate(zip(normal, test))
                if j != missing and before != after
            )
        )
    return counts


def count_disintegratable_by_resimulation(text: str) -> int:
    """Bricks whose removal leaves every other brick where it was."""
    return sum(1 for moved in _moved_counts(text) if moved == 0)


def chain_reaction_total_by_resimulation(text: str) -> int:
    """The chain reaction total, found by dropping the stack again without each brick."""
    return sum(_moved_counts(text))


def main(argv: list[str] | None = None) -> None:
    """Print the chain reaction total, or the safe brick count, for a file of bricks."""
    parser = argparse.ArgumentParser(description="Sand slab chain reactions.")
    parser.add_argument("file", nargs="?", default="input.txt")
    parser.add_argument(
        "--safe", action="store_true", help="count bricks that can be removed safely"
    )
    parser.add_argument(
        "--resimulate", action="store_true", help="drop the whole stack again for each brick"
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    try:
        if args.safe:
            if args.resimulate:
                for i, moved in enumerate(_moved_counts(content)):
                    print(f"With brick {i} missing...{'same' if moved == 0 else 'different'}")
                print(f"#disintegratable = {count_disintegratable_by_resimulation(content)}")
            else:
                _, support = settle(parse_bricks(content))
                safe = sum(
                    1
                    for resting in support.above
                    if all(len(support.below[j]) >= 2 for j in resting)
                )
                print(f"#disintegratable = {safe}")
        else:
            counts = _moved_counts(content) if args.resimulate else _chain_counts(content)
            print(f"sum = {sum(counts)}")
    except ValueError as err:
        print(f"ERROR: {err}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()