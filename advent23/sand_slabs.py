"""Falling sand bricks: which ones can be removed without others falling."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

_SEPARATORS = re.compile(r"[,~]")


@dataclass(frozen=True, order=True)
class Brick:
    """A cuboid brick between two corners; ordered lowest first."""

    z1: int
    z2: int
    y1: int
    y2: int
    x1: int
    x2: int
    name: str = ""


@dataclass
class Support:
    """For each settled brick, the bricks directly beneath it and directly on it."""

    below: list[set[int]] = field(default_factory=list)
    above: list[set[int]] = field(default_factory=list)


def brick_name(n: int) -> str:
    """Spreadsheet-style label: A..Z, then AA, AB, and so on."""
    if n < 0:
        raise ValueError("brick number must not be negative")
    letters = []
    while True:
        letters.append(chr(ord("A") + n % 26))
        if n < 26:
            return "".join(reversed(letters))
        n = n // 26 - 1


def parse_bricks(text: str) -> list[Brick]:
    """Parse ``x1,y1,z1~x2,y2,z2`` lines, naming bricks in input order."""
    bricks = []
    for i, line in enumerate(text.rstrip().splitlines()):
        parts = _SEPARATORS.split(line)
        if len(parts) != 6:
            raise ValueError(f"not a brick line: {line!r}")
        x1, y1, z1, x2, y2, z2 = (int(p) for p in parts)
        bricks.append(
            Brick(
                z1=min(z1, z2), z2=max(z1, z2),
                y1=min(y1, y2), y2=max(y1, y2),
                x1=min(x1, x2), x2=max(x1, x2),
                name=brick_name(i),
            )
        )
    return bricks


def _footprint(brick: Brick) -> list[tuple[int, int]]:
    return [
        (x, y)
        for x in range(brick.x1, brick.x2 + 1)
        for y in range(brick.y1, brick.y2 + 1)
    ]


def settle(bricks: Sequence[Brick]) -> tuple[list[Brick], Support]:
    """Let the bricks fall, lowest first, and record which rest on which.

    Indices in the returned support refer to the returned, settled list.
    """
    ordered = sorted(bricks)
    support = Support(
        below=[set() for _ in ordered], above=[set() for _ in ordered]
    )
    tops: dict[tuple[int, int], tuple[int, int]] = {}
    settled = []
    for i, brick in enumerate(ordered):
        cells = _footprint(brick)
        base = 1 + max((tops[c][1] for c in cells if c in tops), default=0)
        landed = replace(brick, z1=base, z2=base + brick.z2 - brick.z1)
        for cell in cells:
            if cell in tops:
                j, height = tops[cell]
                if height + 1 == base:
                    support.below[i].add(j)
                    support.above[j].add(i)
            tops[cell] = (i, landed.z2)
        settled.append(landed)
    return settled, support


def disintegratable(support: Support) -> set[int]:
    """Bricks whose every brick above also rests on some other brick."""
    return {
        i
        for i, resting in enumerate(support.above)
        if all(len(support.below[j]) >= 2 for j in resting)
    }


def count_disintegratable(text: str) -> int:
    """How many bricks could be removed safely, one at a time."""
    _, support = settle(parse_bricks(text))
    return len(disintegratable(support))


def _number(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def stack_dot(bricks: Sequence[Brick], support: Support, safe: set[int]) -> str:
    """Graphviz source with each brick as a box pointing at the bricks below it."""
    lines = ["digraph {", "  overlap=false"]
    for i, brick in enumerate(bricks):
        depth = brick.z2 - brick.z1 + 1
        label = brick.name * (depth if brick.name == "HO" else 1)
        width = max(brick.x2 - brick.x1 + 1, brick.y2 - brick.y1 + 1) / 3.0
        height = depth / 3.0
        if brick.name == "HO":
            colour = "lightsalmon"
        elif brick.x1 != brick.x2:
            colour = "yellow"
        elif brick.y1 != brick.y2:
            colour = "green"
        else:
            colour = "lightskyblue"
        style = (
            ',color="red",style="filled,dashed",penwidth=4'
            if i in safe
            else ',style="filled"'
        )
        lines.append(
            f'  b{i} [label="{label}",shape="box",fixedsize=true,'
            f'width={_number(width)},height={_number(height)},fillcolor="{colour}"{style}]'
        )
    for i, beneath in enumerate(support.below):
        lines.extend(f"  b{i} -> b{j}" for j in sorted(beneath))
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render(bricks: Sequence[Brick], support: Support, safe: set[int]) -> None:
    with open("graph2.dot", "w", encoding="utf-8") as handle:
        handle.write(stack_dot(bricks, support, safe))
    try:
        result = subprocess.run(
            ["dot", "-Tpdf", "-O", "graph2.dot"], capture_output=True, check=False
        )
        print(f"graphviz... exit status {result.returncode}")
    except OSError as err:
        print(f"graphviz... {err}")


def main(argv: list[str] | None = None) -> None:
    """Print how many bricks can be disintegrated for a file of bricks."""
    parser = argparse.ArgumentParser(description="Sand slabs.")
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
        bricks, support = settle(parse_bricks(content))
    except ValueError as err:
        print(f"ERROR: {err}")
    else:
        safe = disintegratable(support)
        _render(bricks, support, safe)
        print(f"#disintegratable = {len(safe)}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()