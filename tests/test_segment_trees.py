import random

import pytest

from cseskit.segment_trees import MinSegmentTree, PrefixMaxTree, SubarraySumTree


def _random_values(seed, count, low=-30, high=30):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(count)]


def _best_prefix(values, lo, hi):
    running = 0
    best = 0
    for value in values[lo:hi + 1]:
        running += value
        best = max(best, running)
    return best


def _best_subarray(values):
    return max(
        [0] + [sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)]
    )


@pytest.mark.parametrize("count", [1, 2, 7, 16, 23])
def test_min_tree_matches_slice_minimum(count):
    values = _random_values(count, count)
    tree = MinSegmentTree(values)
    for lo in range(count):
        for hi in range(lo, count):
            assert tree.query(lo, hi) == min(values[lo:hi + 1])


def test_min_tree_updates():
    rng = random.Random(11)
    values = _random_values(12, 19)
    tree = MinSegmentTree(values)
    for _ in range(300):
        index = rng.randrange(len(values))
        value = rng.randint(-100, 100)
        values[index] = value
        tree.set(index, value)
        lo = rng.randrange(len(values))
        hi = rng.randrange(lo, len(values))
        assert tree.query(lo, hi) == min(values[lo:hi + 1])


def test_min_tree_errors():
    with pytest.raises(ValueError):
        MinSegmentTree([])
    tree = MinSegmentTree([4, 2, 6])
    with pytest.raises(IndexError):
        tree.query(1, 3)
    with pytest.raises(IndexError):
        tree.set(-1, 0)


@pytest.mark.parametrize("count", [1, 5, 12])
def test_prefix_max_matches_running_sums(count):
    values = _random_values(count + 100, count)
    tree = PrefixMaxTree(values)
    for lo in range(count):
        for hi in range(lo, count):
            assert tree.max_prefix_sum(lo, hi) == _best_prefix(values, lo, hi)


def test_prefix_max_updates():
    rng = random.Random(13)
    values = _random_values(14, 21)
    tree = PrefixMaxTree(values)
    for _ in range(300):
        index = rng.randrange(len(values))
        value = rng.randint(-50, 50)
        values[index] = value
        tree.set(index, value)
        lo = rng.randrange(len(values))
        hi = rng.randrange(lo, len(values))
        assert tree.max_prefix_sum(lo, hi) == _best_prefix(values, lo, hi)


def test_prefix_max_all_negative_is_zero():
    tree = PrefixMaxTree([-3, -1, -4])
    assert tree.max_prefix_sum(0, 2) == 0


def test_prefix_max_errors():
    with pytest.raises(ValueError):
        PrefixMaxTree([])
    tree = PrefixMaxTree([1, 2])
    with pytest.raises(IndexError):
        tree.max_prefix_sum(1, 0)
    with pytest.raises(IndexError):
        tree.set(2, 5)


@pytest.mark.parametrize("count", [1, 3, 8, 13])
def test_subarray_tree_initial(count):
    values = _random_values(count + 200, count)
    tree = SubarraySumTree(values)
    assert tree.max_subarray_sum() == _best_subarray(values)


def test_subarray_tree_updates():
    rng = random.Random(15)
    values = _random_values(16, 17)
    tree = SubarraySumTree(values)
    for _ in range(200):
        index = rng.randrange(len(values))
        value = rng.randint(-40, 40)
        values[index] = value
        tree.set(index, value)
        assert tree.max_subarray_sum() == _best_subarray(values)


def test_subarray_tree_all_positive_is_total():
    values = [4, 1, 6, 2, 9]
    assert SubarraySumTree(values).max_subarray_sum() == sum(values)


def test_subarray_tree_all_negative_is_zero():
    assert SubarraySumTree([-5, -2, -7]).max_subarray_sum() == 0


def test_subarray_tree_bad_index():
    tree = SubarraySumTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.set(3, 1)