"""Games of coloured cubes drawn from a bag."""

from __future__ import annotations

import argparse
import math
import sys

Draw = tuple[tuple[str, int], ...]

LIMITS = {"red": 12, "green": 13, "blue": 14}
COLOURS = ("red", "green", "blue")


def parse_game(line: str) -> tuple[int, list[Draw]]:
    """Parse ``Game N: 3 blue, 4 red; ...`` into the game id and its draws."""
    header, sep, game_str = line.partition(": ")
    if not sep:
        raise ValueError(f"not a game line: {line!r}")
    game_id = int(header.removeprefix("Game "))
    draws = []
    for draw_str in game_str.split("; "):
        cubes = []
        for cube_str in draw_str.split(", "):
            count, _, colour = cube_str.partition(" ")
            cubes.append((colour, int(count)))
        draws.append(tuple(cubes))
    return game_id, draws


def is_possible(draws: list[Draw]) -> bool:
    """Whether every draw fits a bag of 12 red, 13 green and 14 blue cubes."""
    return all(
        count <= LIMITS.get(colour, count)
        for draw in draws
        for colour, count in draw
    )


def minimum_set(draws: list[Draw]) -> dict[str, int]:
    """The fewest cubes of each colour that make all the draws possible."""
    needed = dict.fromkeys(COLOURS, 0)
    for draw in draws:
        for colour, count in draw:
            if colour not in needed:
                raise ValueError(f"unknown colour {colour!r}")
            needed[colour] = max(needed[colour], count)
    return needed


def _games(text: str):
    for line in text.splitlines():
        if ": " in line:
            yield parse_game(line)


def sum_possible_ids(text: str) -> int:
    """Sum the ids of the games that are possible."""
    return sum(game_id for game_id, draws in _games(text) if is_possible(draws))


def sum_powers(text: str) -> int:
    """Sum, over all games, the product of the minimum cube counts."""
    return sum(math.prod(minimum_set(draws).values()) for _, draws in _games(text))


def main(argv: list[str] | None = None) -> None:
    """Print the answer for an input file of games."""
    parser = argparse.ArgumentParser(description="Cube conundrum.")
    parser.add_argument("file", nargs="?", default=None)
    parser.add_argument("--power", action="store_true", help="sum the powers of minimum sets")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    path = args.file or ("input2.txt" if args.power else "input1.txt")
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError:
        print(f"Cannot read '{path}'")
        return

    total = 0
    for game_id, draws in _games(content):
        if args.power:
            needed = minimum_set(draws)
            power = math.prod(needed.values())
            print(
                f"Game {game_id} - {needed['red']} red, {needed['green']} green, "
                f"{needed['blue']} blue - {power} power"
            )
            total += power
        else:
            possible = is_possible(draws)
            print(f"Game {game_id} - possible? {str(possible).lower()}")
            if possible:
                total += game_id
    print(f"Sum == {total}")


if __name__ == "__main__":
    main()