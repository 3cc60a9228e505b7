import pytest

from advent23.mirage import extrapolation_sums, predict

REPORT = """0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45
"""


def test_predict_linear_sequence():
    assert predict([0, 3, 6, 9, 12, 15]) == (-3, 18)


def test_extrapolation_sums_example():
    assert extrapolation_sums(REPORT) == (2, 114)


def test_all_zeros_predicts_zeros():
    assert predict([0, 0, 0]) == (0, 0)
    assert predict([]) == (0, 0)


@pytest.mark.parametrize("value", [5, -7, 0])
def test_constant_sequence_stays_constant(value):
    assert predict([value] * 4) == (value, value)


@pytest.mark.parametrize(
    "sequence",
    [[1, 3, 6, 10, 15, 21], [10, 13, 16, 21, 30, 45], [2, -1, 4, 8, 1]],
)
def test_reversing_swaps_predictions(sequence):
    prev, nxt = predict(sequence)
    assert predict(sequence[::-1]) == (nxt, prev)


@pytest.mark.parametrize("sequence", [[1, 3, 6, 10, 15, 21], [10, 13, 16, 21, 30, 45]])
def test_extended_sequence_is_consistent(sequence):
    prev, nxt = predict(sequence)
    assert predict(sequence + [nxt])[0] == prev
    assert predict([prev] + sequence)[1] == nxt


def test_non_numeric_line_raises():
    with pytest.raises(ValueError):
        extrapolation_sums("1 2 x\n")