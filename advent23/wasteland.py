"""Walking a left/right node network, alone or as a crowd of ghosts."""

from __future__ import annotations

import argparse
import itertools
import math
import re
import subprocess
import sys
import time
from collections.abc import Callable, Iterator

Network = dict[str, tuple[str, str]]

_NODE = re.compile(r"(\w+) = \((\w+), (\w+)\)")


def parse_network(text: str) -> tuple[str, Network]:
    """Split the input into its L/R instructions and a map of node -> (left, right)."""
    instructions, sep, body = text.partition("\n\n")
    if not sep:
        raise ValueError("expected instructions, a blank line, then nodes")
    nodes: Network = {}
    for line in body.splitlines():
        if not line:
            continue
        match = _NODE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"not a node line: {line!r}")
        name, left, right = match.groups()
        nodes[name] = (left, right)
    return instructions, nodes


def _route(
    instructions: str, nodes: Network, start: str, at_end: Callable[[str], bool]
) -> Iterator[str]:
    current = start
    yield current
    for step in itertools.cycle(instructions):
        if at_end(current):
            return
        left, right = nodes[current]
        if step == "L":
            current = left
        elif step == "R":
            current = right
        else:
            raise ValueError(f"unknown instruction {step!r}")
        yield current


def steps_to_zzz(text: str) -> int:
    """Number of steps from ``AAA`` to ``ZZZ``."""
    instructions, nodes = parse_network(text)
    return sum(1 for _ in _route(instructions, nodes, "AAA", lambda n: n == "ZZZ")) - 1


def ghost_cycles(text: str) -> list[int]:
    """Steps from each node ending in ``A`` to the first node ending in ``Z``."""
    instructions, nodes = parse_network(text)
    return [
        sum(1 for _ in _route(instructions, nodes, start, lambda n: n.endswith("Z"))) - 1
        for start in nodes
        if start.endswith("A")
    ]


def _prime_factors(n: int) -> set[int]:
    factors = set()
    f = 2
    while f * f <= n:
        while n % f == 0:
            factors.add(f)
            n //= f
        f += 1
    if n > 1:
        factors.add(n)
    return factors


def ghost_steps(text: str) -> int:
    """Steps until every ghost stands on a ``Z`` node at once.

    This is the product of the distinct prime factors of all the ghost cycles.
    """
    factors = set().union(*map(_prime_factors, ghost_cycles(text)))
    return math.prod(factors)


def network_dot(nodes: Network) -> str:
    """Graphviz source drawing the network, left edges blue and right edges magenta."""
    lines = ["digraph {", "  overlap=false"]
    for name in nodes:
        colour = "green" if name.endswith("A") else "red" if name.endswith("Z") else "white"
        lines.append(f'  {name} [style="filled",fillcolor="{colour}"]')
    for name, (left, right) in nodes.items():
        lines.append(f'  {name} -> {left} [color="blue"]')
        lines.append(f'  {name} -> {right} [color="magenta"]')
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render(nodes: Network) -> None:
    with open("graph.dot", "w", encoding="utf-8") as handle:
        handle.write(network_dot(nodes))
    try:
        result = subprocess.run(
            ["neato", "-Tpdf", "-O", "graph.dot"], capture_output=True, check=False
        )
        print(f"graphviz... exit status {result.returncode}")
    except OSError as err:
        print(f"graphviz... {err}")


def main(argv: list[str] | None = None) -> None:
    """Print the step count for a network file."""
    parser = argparse.ArgumentParser(description="Haunted wasteland.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument("--ghosts", action="store_true", help="walk from every **A node")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    if args.ghosts:
        cycles = ghost_cycles(content)
        print(f"sub cycles = {cycles}")
        print(f"total steps = {ghost_steps(content)}")
    else:
        instructions, nodes = parse_network(content)
        _render(nodes)
        path = list(_route(instructions, nodes, "AAA", lambda n: n == "ZZZ"))
        print(" ".join(path))
        print(f"\nn_steps = {len(path) - 1}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()