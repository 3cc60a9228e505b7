"""Part sorting workflows: accepted ratings and counts of accepted combinations."""

from __future__ import annotations

import argparse
import math
import subprocess
import sys
import time
from collections.abc import Mapping
from dataclasses import dataclass

CATEGORIES = "xmas"
ACCEPT = "A"
REJECT = "R"
START = "in"
MIN_RATING = 1
MAX_RATING = 4000

Part = Mapping[str, int]
Ranges = Mapping[str, tuple[int, int]]


@dataclass(frozen=True)
class Rule:
    """A conditional step: send parts whose ``category`` compares true to ``dest``."""

    category: str
    relation: str
    amount: int
    dest: str

    def __post_init__(self) -> None:
        if self.category not in CATEGORIES or len(self.category) != 1:
            raise ValueError(f"unknown category {self.category!r}")
        if self.relation not in ("<", ">"):
            raise ValueError(f"unknown relation {self.relation!r}")

    def matches(self, part: Part) -> bool:
        """Whether ``part`` satisfies this rule's condition."""
        value = part[self.category]
        if self.relation == ">":
            return value > self.amount
        return value < self.amount


@dataclass(frozen=True)
class Workflow:
    """Rules tried in order, and the destination used when none matches."""

    rules: tuple[Rule, ...]
    dest: str

    def route(self, part: Part) -> str:
        """The destination this workflow sends ``part`` to."""
        return next((rule.dest for rule in self.rules if rule.matches(part)), self.dest)


def _parse_rule(text: str) -> Rule:
    cond, sep, dest = text.partition(":")
    if not sep or len(cond) < 3:
        raise ValueError(f"not a rule: {text!r}")
    return Rule(category=cond[0], relation=cond[1], amount=int(cond[2:]), dest=dest)


def _parse_workflow(line: str) -> tuple[str, Workflow]:
    name, sep, body = line.partition("{")
    if not sep or not body.endswith("}"):
        raise ValueError(f"not a workflow line: {line!r}")
    conditions, comma, dest = body[:-1].rpartition(",")
    rules = tuple(_parse_rule(s) for s in conditions.split(",")) if comma else ()
    return name, Workflow(rules=rules, dest=dest)


def _parse_part(line: str) -> dict[str, int]:
    if not (line.startswith("{") and line.endswith("}")):
        raise ValueError(f"not a part line: {line!r}")
    part = {}
    for field in line[1:-1].split(","):
        key, sep, value = field.partition("=")
        if not sep:
            raise ValueError(f"not a rating: {field!r}")
        part[key] = int(value)
    if set(part) != set(CATEGORIES):
        raise ValueError(f"part must rate exactly {CATEGORIES!r}: {line!r}")
    return part


def parse_system(text: str) -> tuple[dict[str, Workflow], list[dict[str, int]]]:
    """Split the input into named workflows and the list of part ratings."""
    workflows_str, sep, ratings_str = text.rstrip().partition("\n\n")
    if not sep:
        raise ValueError("expected workflows, a blank line, then part ratings")
    workflows = dict(_parse_workflow(line) for line in workflows_str.splitlines() if line)
    parts = [_parse_part(line) for line in ratings_str.splitlines() if line]
    return workflows, parts


def is_accepted(workflows: Mapping[str, Workflow], part: Part) -> bool:
    """Run ``part`` through the workflows from ``in`` until accepted or rejected."""
    name = START
    visited = set()
    while name not in (ACCEPT, REJECT):
        if name in visited:
            raise ValueError(f"workflow cycle through {name!r}")
        visited.add(name)
        name = workflows[name].route(part)
    return name == ACCEPT


def accepted_rating_sum(text: str) -> int:
    """Sum of all ratings of the accepted parts."""
    workflows, parts = parse_system(text)
    return sum(sum(part.values()) for part in parts if is_accepted(workflows, part))


def count_combinations(
    workflows: Mapping[str, Workflow],
    dest: str = START,
    ranges: Ranges | None = None,
) -> int:
    """How many rating combinations within ``ranges`` end up accepted from ``dest``.

    ``ranges`` maps each category to an inclusive (low, high) pair and defaults
    to 1..4000 for every category.
    """
    if ranges is None:
        ranges = {c: (MIN_RATING, MAX_RATING) for c in CATEGORIES}
    if any(low > high for low, high in ranges.values()):
        return 0
    if dest == ACCEPT:
        return math.prod(high - low + 1 for low, high in ranges.values())
    if dest == REJECT:
        return 0

    workflow = workflows[dest]
    remaining = dict(ranges)
    total = 0
    for rule in workflow.rules:
        low, high = remaining[rule.category]
        if rule.relation == ">":
            taken = (max(low, rule.amount + 1), high)
            left = (low, min(high, rule.amount))
        else:
            taken = (low, min(high, rule.amount - 1))
            left = (max(low, rule.amount), high)
        total += count_combinations(workflows, rule.dest, {**remaining, rule.category: taken})
        remaining[rule.category] = left
    return total + count_combinations(workflows, workflow.dest, remaining)


def accepted_combinations(text: str) -> int:
    """Number of distinct rating combinations in 1..4000 that are accepted."""
    workflows, _ = parse_system(text)
    return count_combinations(workflows)


def workflow_dot(workflows: Mapping[str, Workflow]) -> str:
    """Graphviz source for the workflows: default edges blue, rule edges magenta."""
    lines = [
        "digraph {",
        "  overlap=false",
        '  A [style="filled",fillcolor="green"]',
        '  R [style="filled",fillcolor="red"]',
    ]
    for name in workflows:
        colour = "yellow" if name == START else "white"
        lines.append(f'  {name} [style="filled",fillcolor="{colour}"]')
    for name, workflow in workflows.items():
        lines.append(f'  {name} -> {workflow.dest} [color="blue"]')
        lines.extend(f'  {name} -> {rule.dest} [color="magenta"]' for rule in workflow.rules)
    lines.append("}")
    return "\n".join(lines) + "\n"


def _render(workflows: Mapping[str, Workflow]) -> None:
    with open("graph.dot", "w", encoding="utf-8") as handle:
        handle.write(workflow_dot(workflows))
    try:
        result = subprocess.run(
            ["dot", "-Tpdf", "-O", "graph.dot"], capture_output=True, check=False
        )
        print(f"graphviz... exit status {result.returncode}")
    except OSError as err:
        print(f"graphviz... {err}")


def main(argv: list[str] | None = None) -> None:
    """Print the answer for a file of workflows and parts."""
    parser = argparse.ArgumentParser(description="Aplenty.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument(
        "--combinations", action="store_true", help="count accepted rating combinations"
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    workflows, parts = parse_system(content)
    if args.combinations:
        print(f"#combinations = {count_combinations(workflows)}")
    else:
        _render(workflows)
        total = 0
        for part in parts:
            label = ", ".join(f"{c}={part[c]}" for c in CATEGORIES)
            if is_accepted(workflows, part):
                print(f"{label}: Accepted")
                total += sum(part.values())
            else:
                print(f"{label}: Rejected")
        print(f"sum = {total}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()