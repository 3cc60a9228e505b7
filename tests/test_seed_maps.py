import pytest

from advent23.seed_maps import (
    RangeMap,
    lowest_location,
    lowest_location_ranges,
    parse_almanac,
)

ALMANAC = """seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""


def test_parse_almanac_reads_seeds_and_maps():
    seeds, maps = parse_almanac(ALMANAC)
    assert seeds == [79, 14, 55, 13]
    assert maps[0].name == "seed-to-soil"
    assert maps[-1].name == "humidity-to-location"
    assert maps[0].entries == ((50, 98, 2), (52, 50, 48))


def test_lowest_location_example():
    assert lowest_location(ALMANAC) == 35


def test_lowest_location_ranges_example():
    assert lowest_location_ranges(ALMANAC) == 46


def test_map_value_outside_all_entries_is_unchanged():
    range_map = RangeMap("a-to-b", ((50, 98, 2), (52, 50, 48)))
    assert range_map.map_value(10) == 10
    assert range_map.map_value(100) == 100


def test_map_value_uses_entry_offset():
    range_map = RangeMap("a-to-b", ((50, 98, 2),))
    assert range_map.map_value(98) == 50
    assert range_map.map_value(99) == 51


@pytest.mark.parametrize("ranges", [[(79, 14)], [(55, 13)], [(0, 120)], [(90, 20), (3, 4)]])
def test_map_ranges_agrees_with_map_value(ranges):
    _, maps = parse_almanac(ALMANAC)
    for range_map in maps:
        mapped = range_map.map_ranges(ranges)
        expected = {range_map.map_value(v) for start, n in ranges for v in range(start, start + n)}
        got = {v for start, n in mapped for v in range(start, start + n)}
        assert got == expected
        assert sum(n for _, n in mapped) == sum(n for _, n in ranges)
        ranges = mapped


def test_odd_seed_count_is_rejected_for_ranges():
    text = ALMANAC.replace("seeds: 79 14 55 13", "seeds: 79 14 55")
    with pytest.raises(ValueError):
        lowest_location_ranges(text)


def test_almanac_without_maps_is_rejected():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1 2 3")