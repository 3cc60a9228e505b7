"""Scratchcards: points for matching numbers, and cards won as copies."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """One scratchcard: its number, the winning numbers and the numbers held."""

    number: int
    winning: frozenset[int]
    have: frozenset[int]

    def matches(self) -> int:
        """How many held numbers are winning numbers."""
        return len(self.winning & self.have)

    def points(self) -> int:
        """One point for the first match, doubled for each further match."""
        return (1 << self.matches()) >> 1


def _parse_card(line: str) -> Card:
    header, sep, body = line.partition(":")
    winning_str, bar, have_str = body.partition("|")
    if not sep or not bar:
        raise ValueError(f"not a card line: {line!r}")
    return Card(
        number=int(header.split()[-1]),
        winning=frozenset(int(s) for s in winning_str.split()),
        have=frozenset(int(s) for s in have_str.split()),
    )


def parse_cards(text: str) -> list[Card]:
    """Parse every non-empty ``Card N: ... | ...`` line."""
    return [_parse_card(line) for line in text.splitlines() if line]


def total_points(text: str) -> int:
    """Sum of the points of all cards."""
    return sum(card.points() for card in parse_cards(text))


def _copies(cards: list[Card]):
    pending: deque[int] = deque()
    for card in cards:
        copies = 1 + (pending.popleft() if pending else 0)
        for k in range(card.matches()):
            if k < len(pending):
                pending[k] += copies
            else:
                pending.append(copies)
        yield card, copies


def total_cards(text: str) -> int:
    """Number of cards held once every win has produced its copies."""
    return sum(copies for _, copies in _copies(parse_cards(text)))


def main(argv: list[str] | None = None) -> None:
    """Print the answer for a file of scratchcards."""
    parser = argparse.ArgumentParser(description="Scratchcards.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument("--copies", action="store_true", help="count cards won as copies")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    cards = parse_cards(content)
    if args.copies:
        total = 0
        for card, copies in _copies(cards):
            print(f"copies=={copies}, n_common=={card.matches()}")
            total += copies
    else:
        total = 0
        for card in cards:
            print(f"{card.matches()} in common, #points = {card.points()}")
            total += card.points()
    print(f"Sum == {total}")


if __name__ == "__main__":
    main()