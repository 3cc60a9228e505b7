"""Part numbers and gear ratios in an engine schematic."""

from __future__ import annotations

import argparse
import re
import sys

_NUMBER = re.compile(r"[0-9]+")
_NEIGHBOURHOOD = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1)]


def _is_symbol(ch: str) -> bool:
    return ch not in "0123456789."


def part_numbers(text: str) -> list[int]:
    """The numbers adjacent to a symbol, in reading order."""
    lines = text.splitlines()
    near_symbol = {
        (row + di, col + dj)
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if _is_symbol(ch)
        for di, dj in _NEIGHBOURHOOD
    }
    return [
        int(match.group())
        for row, line in enumerate(lines)
        for match in _NUMBER.finditer(line)
        if any((row, col) in near_symbol for col in range(match.start(), match.end()))
    ]


def sum_part_numbers(text: str) -> int:
    """Sum of all part numbers."""
    return sum(part_numbers(text))


def gear_ratios(text: str) -> list[int]:
    """Products of numbers that share an adjacent ``*``, in reading order.

    Each number belongs to the first ``*`` found next to its digits. When a
    further number meets an asterisk, it is multiplied by the first number
    recorded there.
    """
    lines = text.splitlines()
    asterisk_at: dict[tuple[int, int], int] = {}
    asterisks = (
        (row, col)
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if ch == "*"
    )
    for index, (row, col) in enumerate(asterisks):
        for di, dj in _NEIGHBOURHOOD:
            asterisk_at[(row + di, col + dj)] = index

    first_number: dict[int, int] = {}
    ratios = []
    for row, line in enumerate(lines):
        for match in _NUMBER.finditer(line):
            gear = next(
                (
                    asterisk_at[(row, col)]
                    for col in range(match.start(), match.end())
                    if (row, col) in asterisk_at
                ),
                None,
            )
            if gear is None:
                continue
            n = int(match.group())
            if gear in first_number:
                ratios.append(first_number[gear] * n)
            else:
                first_number[gear] = n
    return ratios


def sum_gear_ratios(text: str) -> int:
    """Sum of all gear ratios."""
    return sum(gear_ratios(text))


def main(argv: list[str] | None = None) -> None:
    """Print the answer for a schematic file."""
    parser = argparse.ArgumentParser(description="Gear ratios.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument("--gears", action="store_true", help="sum gear ratios instead")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    if args.gears:
        values = gear_ratios(content)
        for ratio in values:
            print(f"Gear ratio: {ratio}")
    else:
        values = part_numbers(content)
        for n in values:
            print(f"{n} - part number")
    print(f"Sum == {sum(values)}")


if __name__ == "__main__":
    main()