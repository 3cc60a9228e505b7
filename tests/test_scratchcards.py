import pytest

from advent23.scratchcards import (
    Card,
    main,
    parse_cards,
    total_cards,
    total_points,
)

CARDS = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""


def test_parse_cards():
    cards = parse_cards(CARDS)
    assert [c.number for c in cards] == [1, 2, 3, 4, 5, 6]
    assert cards[0].winning == frozenset({41, 48, 83, 86, 17})
    assert cards[0].have == frozenset({83, 86, 6, 31, 17, 9, 48, 53})


def test_parse_skips_blank_lines():
    assert parse_cards(CARDS + "\n\n") == parse_cards(CARDS)


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_cards("Card 1 41 48")


def test_first_card_matches():
    assert parse_cards(CARDS)[0].matches() == 4


@pytest.mark.parametrize("k", [0, 1, 3, 7])
def test_matches_counts_common_numbers(k):
    card = Card(1, frozenset(range(k)), frozenset(range(k)) | {100})
    assert card.matches() == k


def test_no_match_scores_nothing():
    assert Card(1, frozenset({1}), frozenset({2})).points() == 0


@pytest.mark.parametrize("k", [1, 2, 5])
def test_points_double_per_extra_match(k):
    smaller = Card(1, frozenset(range(k)), frozenset(range(k)))
    larger = Card(1, frozenset(range(k + 1)), frozenset(range(k + 1)))
    assert larger.points() == 2 * smaller.points()


def test_total_points_example():
    assert total_points(CARDS) == 13


def test_total_points_is_sum_of_card_points():
    assert total_points(CARDS) == sum(c.points() for c in parse_cards(CARDS))


def test_total_cards_example():
    assert total_cards(CARDS) == 30


def test_total_cards_without_wins_is_card_count():
    text = "Card 1: 1 | 2\nCard 2: 3 | 4\nCard 3: 5 | 6\n"
    assert total_cards(text) == len(parse_cards(text))


def test_main_prints_totals(tmp_path, capsys):
    path = tmp_path / "cards.txt"
    path.write_text(CARDS)
    main([str(path)])
    assert f"Sum == {total_points(CARDS)}" in capsys.readouterr().out
    main([str(path), "--copies"])
    assert f"Sum == {total_cards(CARDS)}" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    main([str(tmp_path / "gone.txt")])
    assert "Cannot read" in capsys.readouterr().out