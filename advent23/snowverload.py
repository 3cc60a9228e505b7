"""Splitting a component graph in two by cutting three wires."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from collections import deque
from collections.abc import Iterable, Mapping, Sequence

Connections = dict[str, list[str]]
Edge = tuple[str, str]


def parse_components(text: str) -> Connections:
    """Read ``name: other other`` lines into an undirected adjacency list."""
    connections: Connections = {}
    for line in text.rstrip().splitlines():
        left, sep, right = line.partition(": ")
        if not sep:
            raise ValueError(f"not a component line: {line!r}")
        connections.setdefault(left, [])
        for other in right.split():
            connections[left].append(other)
            connections.setdefault(other, []).append(left)
    return connections


def edge_tally(connections: Mapping[str, Sequence[str]]) -> list[tuple[int, str, str]]:
    """How often each edge is crossed by a breadth-first search from every node.

    Each entry is (tally, a, b) with ``a <= b``; the list is sorted with the
    largest tallies first.
    """
    tally: dict[Edge, int] = {}
    for start in connections:
        explored: set[str] = set()
        queue = deque((start, n) for n in connections[start])
        while queue:
            node1, node2 = queue.popleft()
            if node2 in explored:
                continue
            explored.add(node2)
            key = (node1, node2) if node1 <= node2 else (node2, node1)
            tally[key] = tally.get(key, 0) + 1
            queue.extend((node2, node3) for node3 in connections[node2])
    return sorted(((count, a, b) for (a, b), count in tally.items()), reverse=True)


def _cut_edges(connections: Mapping[str, Sequence[str]]) -> set[Edge]:
    tally = edge_tally(connections)
    if len(tally) < 3:
        raise ValueError("the graph needs at least three edges to cut")
    return {(a, b) for _, a, b in tally[:3]}


def _is_cut(cut: Iterable[Edge], a: str, b: str) -> bool:
    edges = set(cut)
    return (a, b) in edges or (b, a) in edges


def _group_size(connections: Mapping[str, Sequence[str]], cut: set[Edge]) -> int:
    start = next(iter(connections))
    explored: set[str] = set()
    queue = deque([start])
    while queue:
        node1 = queue.popleft()
        if node1 in explored:
            continue
        explored.add(node1)
        queue.extend(
            node2 for node2 in connections[node1] if not _is_cut(cut, node1, node2)
        )
    return len(explored)


def split_product(text: str) -> int:
    """Cut the three busiest edges and multiply the sizes of the two sides."""
    connections = parse_components(text)
    cut = _cut_edges(connections)
    group_a = _group_size(connections, cut)
    return group_a * (len(connections) - group_a)


def component_dot(connections: Mapping[str, Sequence[str]], cut: Iterable[Edge]) -> str:
    """Graphviz source for the undirected graph with the cut edges in red."""
    cut_edges = set(cut)
    lines = ["graph {", "  overlap=false"]
    for a, b in sorted(cut_edges):
        lines.append(f'  {a} [style="filled",fillcolor="red"]')
        lines.append(f'  {b} [style="filled",fillcolor="red"]')
    for a, others in connections.items():
        for b in others:
            if a < b:
                attrs = 'len=100, penwidth=3, color="red"' if _is_cut(cut_edges, a, b) else ""
                lines.append(f"  {a} -- {b} [{attrs}]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render(connections: Connections, cut: set[Edge]) -> None:
    with open("graph.dot", "w", encoding="utf-8") as handle:
        handle.write(component_dot(connections, cut))
    try:
        result = subprocess.run(
            ["neato", "-Tpdf", "-O", "graph.dot"], capture_output=True, check=False
        )
        print(f"graphviz... exit status {result.returncode}")
    except OSError as err:
        print(f"graphviz... {err}")


def main(argv: list[str] | None = None) -> None:
    """Split the component graph in a file and report the two group sizes."""
    parser = argparse.ArgumentParser(description="Snowverload.")
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
        connections = parse_components(content)
        print("Doing lots of BFSs")
        cut = _cut_edges(connections)
        _render(connections, cut)
        print(f"Checking graph after disallowing {sorted(cut)}")
        n_total = len(connections)
        n_a = _group_size(connections, cut)
        n_b = n_total - n_a
        print(
            f"Nodes: total - {n_total}, group A - {n_a}, group B - {n_b}, "
            f"product = {n_a * n_b}"
        )
    except ValueError as err:
        print(f"ERROR: {err}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()