"""Almanac range maps from seeds to locations."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

Entry = tuple[int, int, int]


@dataclass(frozen=True)
class RangeMap:
    """One ``x-to-y map``: entries of (destination start, source start, length)."""

    name: str
    entries: tuple[Entry, ...]

    def map_value(self, value: int) -> int:
        """Map a single number through the first entry whose source range holds it."""
        for dest, src, length in self.entries:
            if src <= value < src + length:
                return value + dest - src
        return value

    def map_ranges(self, ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
        """Map (start, length) ranges, splitting them where entries begin or end."""
        pending = deque(ranges)
        mapped = []
        while pending:
            start, length = pending.popleft()
            for dest, src, span in self.entries:
                if start < src + span and src < start + length:
                    preceding = src - start
                    if preceding > 0:
                        pending.appendleft((start, preceding))
                        start += preceding
                        length -= preceding
                    succeeding = (start + length) - (src + span)
                    if succeeding > 0:
                        pending.appendleft((src + span, succeeding))
                        length -= succeeding
                    start += dest - src
                    break
            mapped.append((start, length))
        return mapped


def _parse_map(block: str) -> RangeMap | None:
    lines = block.splitlines()
    if not lines:
        return None
    header = lines[0].split()
    entries = []
    for line in lines[1:]:
        dest, src, length = (int(s) for s in line.split())
        entries.append((dest, src, length))
    return RangeMap(name=header[0] if header else "", entries=tuple(entries))


def parse_almanac(text: str) -> tuple[list[int], list[RangeMap]]:
    """Split an almanac into its seed numbers and its maps, in order."""
    seeds_str, sep, maps_str = text.partition("\n\n")
    if not sep:
        raise ValueError("almanac has no maps after the seeds line")
    seeds = [int(s) for s in seeds_str.split()[1:]]
    maps = [m for m in map(_parse_map, maps_str.split("\n\n")) if m is not None]
    return seeds, maps


def lowest_location(text: str) -> int:
    """The lowest location reached by any listed seed."""
    seeds, maps = parse_almanac(text)
    locations = []
    for seed in seeds:
        for range_map in maps:
            seed = range_map.map_value(seed)
        locations.append(seed)
    return min(locations)


def lowest_location_ranges(text: str) -> int:
    """The lowest location when the seed line lists (start, length) pairs."""
    seeds, maps = parse_almanac(text)
    if len(seeds) % 2:
        raise ValueError("seed ranges must come in (start, length) pairs")
    ranges = list(zip(seeds[::2], seeds[1::2]))
    for range_map in maps:
        ranges = range_map.map_ranges(ranges)
    return min(start for start, _ in ranges)


def main(argv: list[str] | None = None) -> None:
    """Print the lowest location for an almanac file."""
    parser = argparse.ArgumentParser(description="Seed to location maps.")
    parser.add_argument("file", nargs="?", default="input1.txt")
    parser.add_argument("--ranges", action="store_true", help="read seeds as ranges")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        with open(args.file, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as err:
        print(f"Cannot read '{args.file}': {err}")
        return

    start = time.perf_counter()
    answer = lowest_location_ranges(content) if args.ranges else lowest_location(content)
    print(f"Minimum = {answer}")
    print(f"Time: {time.perf_counter() - start:.6f}s")


if __name__ == "__main__":
    main()