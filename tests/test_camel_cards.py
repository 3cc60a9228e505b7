import pytest

from advent23.camel_cards import HandType, hand_type, hand_type_with_jokers, total_winnings

HANDS = """32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""


@pytest.mark.parametrize(
    "hand, expected",
    [
        ("32T3K", HandType.ONE_PAIR),
        ("KK677", HandType.TWO_PAIR),
        ("KTJJT", HandType.TWO_PAIR),
        ("T55J5", HandType.THREE_OF_A_KIND),
        ("QQQJA", HandType.THREE_OF_A_KIND),
        ("AAAAA", HandType.FIVE_OF_A_KIND),
        ("AA8AA", HandType.FOUR_OF_A_KIND),
        ("23332", HandType.FULL_HOUSE),
        ("23456", HandType.HIGH_CARD),
    ],
)
def test_hand_type(hand, expected):
    assert hand_type(hand) == expected


@pytest.mark.parametrize(
    "hand, expected",
    [
        ("32T3K", HandType.ONE_PAIR),
        ("KK677", HandType.TWO_PAIR),
        ("T55J5", HandType.FOUR_OF_A_KIND),
        ("KTJJT", HandType.FOUR_OF_A_KIND),
        ("QQQJA", HandType.FOUR_OF_A_KIND),
        ("JJJJJ", HandType.FIVE_OF_A_KIND),
        ("2345J", HandType.ONE_PAIR),
        ("2233J", HandType.FULL_HOUSE),
    ],
)
def test_hand_type_with_jokers(hand, expected):
    assert hand_type_with_jokers(hand) == expected


def test_jokers_never_weaken_a_hand():
    for hand in ["32T3K", "T55J5", "KK677", "KTJJT", "QQQJA", "JJ234", "J2J2J"]:
        assert hand_type_with_jokers(hand) >= hand_type(hand)


def test_total_winnings_example():
    assert total_winnings(HANDS) == 6440


def test_total_winnings_with_jokers_example():
    assert total_winnings(HANDS, jokers=True) == 5905


def test_single_hand_wins_its_bid():
    assert total_winnings("AKQT9 123\n") == 123


def test_unknown_card_raises():
    with pytest.raises(ValueError):
        hand_type("2345X")