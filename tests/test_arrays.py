import pytest

from algodrills.arrays import above_average_ratio, classify_scale, min_max


def test_min_max_matches_builtins():
    values = [20, 10, 35, 30, 7]
    assert min_max(values) == (min(values), max(values))


def test_min_max_single_and_negative():
    assert min_max([-4]) == (-4, -4)
    assert min_max([-1, -9, 3]) == (-9, 3)


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])


def test_classify_scale_ascending_and_descending():
    assert classify_scale([1, 2, 3, 4, 5, 6, 7, 8]) == "ascending"
    assert classify_scale([8, 7, 6, 5, 4, 3, 2, 1]) == "descending"


def test_classify_scale_mixed():
    assert classify_scale([8, 1, 7, 2, 6, 3, 5, 4]) == "mixed"
    assert classify_scale([1, 2, 3, 4, 5, 6, 8, 7]) == "mixed"


def test_classify_scale_wrong_length():
    with pytest.raises(ValueError):
        classify_scale([1, 2, 3])


def test_above_average_ratio_example():
    assert above_average_ratio([50, 50, 70, 80, 100]) == pytest.approx(40.0)


def test_above_average_ratio_all_equal_is_zero():
    assert above_average_ratio([60, 60, 60]) == 0.0


def test_above_average_ratio_stays_below_hundred():
    scores = [1, 5, 9, 100, 3, 3]
    assert 0 <= above_average_ratio(scores) < 100


def test_above_average_ratio_empty_raises():
    with pytest.raises(ValueError):
        above_average_ratio([])