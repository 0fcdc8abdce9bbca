import pytest

from airlog_core.downsampling.median import median


def test_median_of_empty_is_none():
    assert median([]) is None


def test_median_of_one_element():
    assert median([4.5]) == 4.5


def test_median_of_two_elements_is_their_mean():
    assert median([1, 3]) == 2


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], 2),
        ([2, 4, 6, 8], 5),
        ([1, 2, 3, 4, 5], 3),
        ([2, 4, 6, 8, 10, 100], 7),
        ([100, 2, 10, 4, 8, 6], 7),
    ],
)
def test_median_of_many_elements(values, expected):
    assert median(values) == expected


def test_median_does_not_reorder_input():
    values = [5, 1, 4, 2, 3]
    median(values)
    assert values == [5, 1, 4, 2, 3]
