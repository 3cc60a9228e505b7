"""Longest hikes through a trail map, with or without slippery slopes."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from graphlib import CycleError, TopologicalSorter

START_INDEX = 0
END_INDEX = 1

_SLOPES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class Junction:
    """A point where trails meet, with (junction index, distance) edges leaving it."""

    index: int
    i: int
    j: int
    dest: list[tuple[int, int]] = field(default_factory=list)


def _parse_grid(text: str) -> list[str]:
    grid = text.rstrip().splitlines()
    if len(grid) < 2 or len(grid[0]) < 3:
        raise ValueError("trail map is too small")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("trail map rows differ in width")
    return grid


def _around(i: int, j: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for di, dj in _MOVES:
        ni, nj = i + di, j + dj
        if 0 <= ni < height and 0 <= nj < width:
            yield ni, nj


def _next_cells(
    grid: Sequence[str], i: int, j: int, slippery: bool
) -> list[tuple[int, int]]:
    height, width = len(grid), len(grid[0])
    ch = grid[i][j]
    if not slippery:
        return [] if ch == "#" else list(_around(i, j, height, width))
    if ch == ".":
        return list(_around(i, j, height, width))
    if ch in _SLOPES:
        di, dj = _SLOPES[ch]
        ni, nj = i + di, j + dj
        return [(ni, nj)] if 0 <= ni < height and 0 <= nj < width else []
    return []


def find_junctions(grid: Sequence[str], slippery: bool = True) -> list[Junction]:
    """Collapse the map into junctions joined by trail lengths.

    Junction 0 is the entrance in the top row and junction 1 the exit in the
    bottom row. With ``slippery`` set, slopes may only be walked downhill and
    the edges are directed; otherwise every edge appears in both directions.
    """
    height, width = len(grid), len(grid[0])
    nodes = [
        Junction(START_INDEX, 0, 1),
        Junction(END_INDEX, height - 1, width - 2),
    ]
    index_of = {(node.i, node.j): node.index for node in nodes}

    for i, row in enumerate(grid[1:-1], start=1):
        for j, ch in enumerate(row[1:-1], start=1):
            if ch != ".":
                continue
            exits = sum(grid[a][b] != "#" for a, b in _around(i, j, height, width))
            if exits > 2:
                index_of[(i, j)] = len(nodes)
                nodes.append(Junction(len(nodes), i, j))

    for node in nodes:
        explored = {(node.i, node.j)}
        queue = deque((cell, 1) for cell in _around(node.i, node.j, height, width))
        while queue:
            cell, dist = queue.popleft()
            if cell in explored:
                continue
            explored.add(cell)
            target = index_of.get(cell)
            if target is not None:
                node.dest.append((target, dist))
                continue
            queue.extend((nxt, dist + 1) for nxt in _next_cells(grid, *cell, slippery))
    return nodes


def longest_downhill(nodes: Sequence[Junction]) -> int:
    """Longest route from entrance to exit over directed, acyclic edges.

    Returns 0 when the exit cannot be reached.
    """
    graph = {node.index: {src.index for src in nodes if any(d == node.index for d, _ in src.dest)}
             for node in nodes}
    try:
        order = list(TopologicalSorter(graph).static_order())
    except CycleError as err:
        raise ValueError("downhill trails form a cycle") from err
    total = {START_INDEX: 0}
    for index in order:
        if index not in total:
            continue
        for to_index, dist in nodes[index].dest:
            total[to_index] = max(total.get(to_index, 0), total[index] + dist)
    return total.get(END_INDEX, 0)


def longest_hike(nodes: Sequence[Junction]) -> int:
    """Longest route from entrance to exit that never visits a junction twice.

    Returns 0 when the exit cannot be reached.
    """
    visited: set[int] = set()

    def search(current: int, so_far: int) -> int:
        if current == END_INDEX:
            return so_far
        visited.add(current)
        best = 0
        for to_index, dist in nodes[current].dest:
            if to_index not in visited:
                best = max(best, search(to_index, so_far + dist))
        visited.discard(current)
        return best

    return search(START_INDEX, 0)


def longest_path(text: str, slippery: bool = True) -> int:
    """Length of the longest hike through the map in ``text``."""
    nodes = find_junctions(_parse_grid(text), slippery)
    return longest_downhill(nodes) if slippery else longest_hike(nodes)


def junction_dot(nodes: Sequence[Junction], directed: bool = True) -> str:
    """Graphviz source for the junction graph, edges labelled with their length."""
    lines = ["digraph {" if directed else "graph {", "  overlap=false"]
    colours = {START_INDEX: "green", END_INDEX: "red"}
    for node in nodes:
        colour = colours.get(node.index, "white")
        lines.append(
            f'  n{node.index} [label="{node.index}:({node.i},{node.j})",'
            f'shape="box",style="filled",fillcolor="{colour}"]'
        )
    for node in nodes:
        for to_index, dist in node.dest:
            if directed:
                lines.append(f'  n{node.index} -> n{to_index} [label="{dist}"]')
            elif node.index < to_index:
                lines.append(f'  n{node.index} -- n{to_index} [label="{dist}"]')
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render(nodes: Sequence[Junction], directed: bool) -> None:
    path = "graph.dot" if directed else "graph2.dot"
    program = "dot" if directed else "neato"
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(junction_dot(nodes, directed))
    try:
        result = subprocess.run(
            [program, "-Tpdf", "-O", path], capture_output=True, check=False
        )
        print(f"graphviz... exit status {result.returncode}")
    except OSError as err:
        print(f"graphviz... {err}")


def main(argv: list[str] | None = None) -> None:
    """Print the longest hike for a trail map file."""
    parser = argparse.ArgumentParser(description="A long walk.")
    parser.add_argument("file", nargs="?", default="input.txt")
    parser.add_argument("--hike", action="store_true", help="treat slopes as ordinary paths")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    try:
        slippery = not args.hike
        nodes = find_junctions(_parse_grid(content), slippery)
        _render(nodes, directed=slippery)
        steps = longest_downhill(nodes) if slippery else longest_hike(nodes)
        print(f"#steps = {steps}")
    except ValueError as err:
        print(f"ERROR: {err}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()