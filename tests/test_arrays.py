import random

import pytest

from recurkit.arrays import merge_sort, zig_zag


def _random_lists():
    rng = random.Random(1234)
    return [[rng.randint(-50, 50) for _ in range(size)] for size in (0, 1, 2, 3, 7, 20, 101)]


@pytest.mark.parametrize("values", _random_lists())
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_source_example():
    values = [6, 2, 4, 7, 3, 2, 1]
    assert merge_sort(values) == sorted(values)


def test_merge_sort_does_not_modify_input():
    values = [3, 1, 2]
    merge_sort(values)
    assert values == [3, 1, 2]


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __le__(self, other):
            return self.key <= other.key

    items = [Key(k, t) for t, k in enumerate([2, 1, 2, 1, 2])]
    result = merge_sort(items)
    assert [item.key for item in result] == sorted(item.key for item in items)
    for a, b in zip(result, result[1:]):
        if a.key == b.key:
            assert a.tag < b.tag


def _is_zig_zag(values):
    return all(
        (values[j - 1] <= values[j]) if j % 2 == 1 else (values[j - 1] >= values[j])
        for j in range(1, len(values))
    )


@pytest.mark.parametrize("values", _random_lists())
def test_zig_zag_pattern_holds(values):
    result = zig_zag(values)
    assert sorted(result) == sorted(values)
    assert _is_zig_zag(result)


def test_zig_zag_source_example():
    values = [4, 3, 7, 8, 6, 2, 1]
    result = zig_zag(values)
    assert result == [3, 7, 4, 8, 2, 6, 1]
    assert values == [4, 3, 7, 8, 6, 2, 1]


def test_zig_zag_already_arranged_is_unchanged():
    values = [1, 5, 2, 6, 3]
    assert zig_zag(values) == values