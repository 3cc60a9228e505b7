"""Camel Cards: ranking poker-like hands and totalling winnings."""

from __future__ import annotations

import argparse
import sys
import time
from collections import Counter
from enum import IntEnum

CARDS = "23456789TJQKA"
JOKER_CARDS = "J23456789TQKA"


class HandType(IntEnum):
    """Hand strengths, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def _check(hand: str, order: str) -> None:
    unknown = set(hand) - set(order)
    if unknown:
        raise ValueError(f"unknown card(s) {''.join(sorted(unknown))!r} in {hand!r}")


def _classify(counts: list[int]) -> HandType:
    top = counts[0] if counts else 0
    second = counts[1] if len(counts) > 1 else 0
    if top >= 5:
        return HandType.FIVE_OF_A_KIND
    if top == 4:
        return HandType.FOUR_OF_A_KIND
    if top == 3:
        return HandType.FULL_HOUSE if second == 2 else HandType.THREE_OF_A_KIND
    if top == 2:
        return HandType.TWO_PAIR if second == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def hand_type(hand: str) -> HandType:
    """The type of ``hand`` with ``J`` as an ordinary jack."""
    _check(hand, CARDS)
    return _classify(sorted(Counter(hand).values(), reverse=True))


def hand_type_with_jokers(hand: str) -> HandType:
    """The best type ``hand`` can make when each ``J`` stands in for any card."""
    _check(hand, JOKER_CARDS)
    jokers = hand.count("J")
    counts = sorted(Counter(c for c in hand if c != "J").values(), reverse=True) or [0]
    counts[0] += jokers
    return _classify(counts)


def _ranked(text: str, jokers: bool) -> list[tuple[str, int, HandType]]:
    order = JOKER_CARDS if jokers else CARDS
    classify = hand_type_with_jokers if jokers else hand_type
    hands = []
    for line in text.splitlines():
        if not line:
            continue
        hand, sep, bid = line.partition(" ")
        if not sep:
            raise ValueError(f"not a hand line: {line!r}")
        hands.append((hand, int(bid), classify(hand)))
    return sorted(hands, key=lambda h: (h[2], tuple(order.index(c) for c in h[0])))


def total_winnings(text: str, jokers: bool = False) -> int:
    """Sum of rank times bid over all hands, weakest ranked first."""
    return sum(rank * bid for rank, (_, bid, _) in enumerate(_ranked(text, jokers), start=1))


def main(argv: list[str] | None = None) -> None:
    """Print the total winnings for a file of hands."""
    parser = argparse.ArgumentParser(description="Camel Cards.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument("--jokers", action="store_true", help="treat J as a joker")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    total = 0
    for rank, (hand, bid, kind) in enumerate(_ranked(content, args.jokers), start=1):
        winnings = rank * bid
        total += winnings
        print(f"{hand} {kind.name} bid={bid}, rank == {rank}, winnings = {winnings}")
    print(f"sum = {total}")
    print(f"---\ntime: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()