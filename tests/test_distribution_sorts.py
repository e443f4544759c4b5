import random

import pytest

from dsalgo.distribution_sorts import bucket_sort, counting_sort, radix_sort


FLOAT_CASES = [
    [0.78, 0.17, 0.39, 0.26, 0.72, 0.94, 0.21, 0.12, 0.23, 0.68],
    [],
    [0.1, 0.2, 0.3, 0.4, 0.5],
    [0.42, 0.32, 0.33, 0.42, 0.12, 0.89],
    [0.5],
]


@pytest.mark.parametrize("data", FLOAT_CASES)
def test_bucket_sort_source_cases(data):
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_pinned_example():
    assert bucket_sort([0.42, 0.32, 0.33, 0.42, 0.12, 0.89]) == [
        0.12, 0.32, 0.33, 0.42, 0.42, 0.89,
    ]


def test_bucket_sort_values_outside_unit_interval():
    data = [2.5, -1.0, 0.3, 7.0, 0.99, -3.5, 1.0]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_does_not_modify_input():
    data = [0.9, 0.1, 0.5]
    copy = list(data)
    bucket_sort(data)
    assert data == copy


def test_bucket_sort_random():
    rng = random.Random(7)
    data = [rng.random() for _ in range(200)]
    assert bucket_sort(data) == sorted(data)


INT_CASES = [
    [4, 2, 7, 1, 3],
    [],
    [5, 2, 8, 1, 9, 3, 7, 4],
    [4, 2, 4, 1, 3, 2, 1],
    [0, 0, 0],
    [9],
]


@pytest.mark.parametrize("data", INT_CASES)
def test_counting_sort_source_cases(data):
    assert counting_sort(data) == sorted(data)


def test_counting_sort_pinned_example():
    assert counting_sort([4, 2, 4, 1, 3, 2, 1]) == [1, 1, 2, 2, 3, 4, 4]


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_counting_sort_random_preserves_multiset():
    rng = random.Random(11)
    data = [rng.randrange(50) for _ in range(300)]
    result = counting_sort(data)
    assert result == sorted(data)
    assert len(result) == len(data)


RADIX_CASES = [
    [170, 45, 75, 90, 802, 24, 2, 66],
    [],
    [5, 2, 8, 1, 9],
    [121, 432, 564, 23, 1, 45, 788],
    [0, 0, 0, 0],
    [10, 100, 1, 1000, 0],
]


@pytest.mark.parametrize("data", RADIX_CASES)
def test_radix_sort_source_cases(data):
    assert radix_sort(data) == sorted(data)


def test_radix_sort_pinned_example():
    assert radix_sort([170, 45, 75, 90, 802, 24, 2, 66]) == [
        2, 24, 45, 66, 75, 90, 170, 802,
    ]


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([5, -20, 3])


def test_radix_sort_random_large_values():
    rng = random.Random(3)
    data = [rng.randrange(10**9) for _ in range(200)]
    assert radix_sort(data) == sorted(data)


def test_radix_sort_does_not_modify_input():
    data = [30, 3, 300]
    copy = list(data)
    radix_sort(data)
    assert data == copy