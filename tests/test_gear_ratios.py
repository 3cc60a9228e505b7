from advent23.gear_ratios import (
    gear_ratios,
    main,
    part_numbers,
    sum_gear_ratios,
    sum_part_numbers,
)

SCHEMATIC = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""


def test_part_numbers_in_reading_order():
    assert part_numbers(SCHEMATIC) == [467, 35, 633, 617, 592, 755, 664, 598]


def test_numbers_without_symbol_are_excluded():
    found = part_numbers(SCHEMATIC)
    assert 114 not in found
    assert 58 not in found


def test_sum_part_numbers_matches_list():
    assert sum_part_numbers(SCHEMATIC) == sum(part_numbers(SCHEMATIC))


def test_diagonal_and_row_end_adjacency():
    text = "12\n..#\n....45\n.....&"
    assert part_numbers(text) == [12, 45]


def test_no_symbols_means_no_parts():
    assert part_numbers("123\n456\n") == []


def test_gear_ratios():
    assert gear_ratios(SCHEMATIC) == [467 * 35, 755 * 598]


def test_single_number_at_asterisk_is_not_a_gear():
    assert gear_ratios("617*......\n..........\n") == []


def test_sum_gear_ratios_matches_list():
    assert sum_gear_ratios(SCHEMATIC) == sum(gear_ratios(SCHEMATIC))


def test_main_parts_and_gears(tmp_path, capsys):
    path = tmp_path / "schematic.txt"
    path.write_text(SCHEMATIC)
    main([str(path)])
    assert f"Sum == {sum_part_numbers(SCHEMATIC)}" in capsys.readouterr().out
    main([str(path), "--gears"])
    assert f"Sum == {sum_gear_ratios(SCHEMATIC)}" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    main([str(tmp_path / "absent.txt")])
    assert "Cannot read" in capsys.readouterr().out