"""Garden plots an elf can reach by taking an exact number of steps."""

from __future__ import annotations

import argparse
import sys
import time

PART1_STEPS = 64
TOTAL_STEPS = 26501365

Grid = list[list[bool]]
Position = tuple[int, int]

_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))


def parse_garden(text: str) -> tuple[Grid, Position]:
    """Read the map: ``True`` for a garden plot, ``False`` for rock, plus the start."""
    grid: Grid = []
    start: Position | None = None
    for i, line in enumerate(text.rstrip().splitlines()):
        row = []
        for j, ch in enumerate(line):
            if ch == "S":
                start = (i, j)
            row.append(ch != "#")
        grid.append(row)
    if not grid or not grid[0]:
        raise ValueError("empty garden")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("garden rows differ in width")
    if start is None:
        raise ValueError("garden has no start 'S'")
    return grid, start


def reachable_exactly(grid: Grid, start: Position, steps: int) -> set[Position]:
    """Plots on which a walk of exactly ``steps`` steps from ``start`` can end.

    A plot qualifies when its shortest distance is at most ``steps`` and has
    the same parity, since the walker can always step back and forth.
    """
    if steps < 0:
        raise ValueError("steps must not be negative")
    height, width = len(grid), len(grid[0])
    parity = steps % 2
    seen = {start}
    reached = {start} if parity == 0 else set()
    frontier = [start]
    for step in range(1, steps + 1):
        following = []
        for i, j in frontier:
            for di, dj in _MOVES:
                ni, nj = i + di, j + dj
                pos = (ni, nj)
                if 0 <= ni < height and 0 <= nj < width and grid[ni][nj] and pos not in seen:
                    seen.add(pos)
                    following.append(pos)
                    if step % 2 == parity:
                        reached.add(pos)
        frontier = following
        if not frontier:
            break
    return reached


def count_plots(text: str, steps: int = PART1_STEPS) -> int:
    """Number of plots reachable in exactly ``steps`` steps within the map."""
    grid, start = parse_garden(text)
    return len(reachable_exactly(grid, start, steps))


def _infinite_counts(
    grid: Grid, start: Position, total_steps: int, checkpoints: list[int]
) -> list[int]:
    """Counts of plots of the right parity for ``total_steps`` on a tiled map.

    One count is taken after each checkpoint's number of steps.
    """
    height, width = len(grid), len(grid[0])
    explored = {start}
    count = 1 if total_steps % 2 == 0 else 0
    frontier = {start}
    done = 0
    counts = []
    for target in checkpoints:
        while done < target:
            exact = (total_steps - done) % 2 == 1
            following = set()
            for i, j in frontier:
                for di, dj in _MOVES:
                    pos = (i + di, j + dj)
                    if grid[pos[0] % height][pos[1] % width] and pos not in explored:
                        explored.add(pos)
                        following.add(pos)
                        if exact:
                            count += 1
            frontier = following
            done += 1
        counts.append(count)
    return counts


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def count_infinite_plots(text: str, total_steps: int = TOTAL_STEPS) -> int:
    """Plots reachable in exactly ``total_steps`` steps on an endlessly repeated map.

    Three sample counts, taken every two map heights, are fitted with a
    quadratic that is then evaluated at ``total_steps``.
    """
    grid, start = parse_garden(text)
    initial = (len(grid) - 1) // 2
    stride = len(grid) * 2
    if total_steps < initial:
        raise ValueError(f"total_steps must be at least {initial}")
    p0, p1, p2 = _infinite_counts(
        grid, start, total_steps, [initial, initial + stride, initial + 2 * stride]
    )
    a = _tdiv(p2, 2) - p1 + _tdiv(p0, 2)
    b = _tdiv(-p2, 2) + 2 * p1 - _tdiv(3 * p0, 2)
    c = p0
    n = (total_steps - initial) // stride
    return a * n * n + b * n + c


def _render(grid: Grid, reached: set[Position]) -> str:
    rows = []
    for i, row in enumerate(grid):
        cells = []
        for j, open_plot in enumerate(row):
            if (i, j) in reached:
                cells.append("\x1b[31;1mO\x1b[m")
            else:
                cells.append("." if open_plot else "#")
        rows.append("".join(cells))
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> None:
    """Print the plot count for a garden map file."""
    parser = argparse.ArgumentParser(description="Step counter.")
    parser.add_argument("file", nargs="?", default="input.txt")
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--infinite", action="store_true", help="tile the map endlessly")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start_time = time.perf_counter()
    try:
        if args.infinite:
            total = TOTAL_STEPS if args.steps is None else args.steps
            print(f"#plots = {count_infinite_plots(content, total)}")
        else:
            steps = PART1_STEPS if args.steps is None else args.steps
            grid, start = parse_garden(content)
            print(f"start=({start[0]},{start[1]})")
            reached = reachable_exactly(grid, start, steps)
            print(_render(grid, reached))
            print(f"#garden plots reachable in exactly {steps} steps = {len(reached)}")
    except ValueError as err:
        print(f"ERROR: {err}")
    print(f"---\ntime: {time.perf_counter() - start_time:.6f}s")


if __name__ == "__main__":
    main()