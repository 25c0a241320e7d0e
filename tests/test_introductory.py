import math

import pytest

from cseskit.introductory import (
    beautiful_permutation,
    bit_strings,
    coin_piles,
    digit_query,
    gray_code,
    increasing_array,
    missing_number,
    number_spiral,
    palindrome_reorder,
    repetitions,
    tower_of_hanoi,
    trailing_zeros,
    two_knights,
    two_sets,
    weird_algorithm,
)


@pytest.mark.parametrize("start", [3, 7, 27, 100])
def test_weird_algorithm_follows_rule(start):
    seq = weird_algorithm(start)
    assert seq[0] == start
    assert seq[-1] == 1
    for a, b in zip(seq, seq[1:]):
        assert b == (a * 3 + 1 if a % 2 else a // 2)


def test_weird_algorithm_one():
    assert weird_algorithm(1) == [1]


def test_missing_number_finds_removed():
    numbers = list(range(1, 11))
    removed = numbers.pop(3)
    assert missing_number(10, numbers) == removed


def test_missing_number_none_missing():
    with pytest.raises(ValueError):
        missing_number(3, [1, 2, 3])


def test_repetitions_longest_run():
    assert repetitions("AC" + "G" * 7 + "TT") == 7
    assert repetitions("T" * 5) == 5


def test_increasing_array_example():
    assert increasing_array([3, 2, 5, 1, 7]) == 5


def test_increasing_array_sorted_is_zero():
    assert increasing_array([1, 1, 2, 5, 9]) == 0


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_impossible(n):
    assert beautiful_permutation(n) is None


def test_beautiful_permutation_small_cases():
    assert beautiful_permutation(1) == [1]
    assert beautiful_permutation(4) == [2, 4, 1, 3]


@pytest.mark.parametrize("n", [5, 6, 10])
def test_beautiful_permutation_valid(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


def test_number_spiral_fills_square():
    size = 6
    values = {number_spiral(r, c) for r in range(1, size + 1) for c in range(1, size + 1)}
    assert values == set(range(1, size * size + 1))


def test_number_spiral_rejects_zero():
    with pytest.raises(ValueError):
        number_spiral(0, 1)


def test_two_knights_example():
    assert two_knights(8) == [0, 6, 28, 96, 252, 550, 1056, 1848]


@pytest.mark.parametrize("n", [3, 4, 7, 8, 11, 12])
def test_two_sets_partition(n):
    one, two = two_sets(n)
    assert sorted(one + two) == list(range(1, n + 1))
    assert sum(one) == sum(two)


@pytest.mark.parametrize("n", [1, 2, 5, 6])
def test_two_sets_impossible(n):
    assert two_sets(n) is None


def test_bit_strings_doubles():
    for n in range(0, 50):
        assert bit_strings(n + 1) == bit_strings(n) * 2 % 1000000007


@pytest.mark.parametrize("n", [0, 4, 5, 24, 25, 126, 1000])
def test_trailing_zeros_matches_factorial(n):
    text = str(math.factorial(n))
    assert trailing_zeros(n) == len(text) - len(text.rstrip("0"))


def _can_empty(a, b):
    if a == 0 and b == 0:
        return True
    if a >= 2 and b >= 1 and _can_empty(a - 2, b - 1):
        return True
    return a >= 1 and b >= 2 and _can_empty(a - 1, b - 2)


def test_coin_piles_agrees_with_search():
    for a in range(0, 12):
        for b in range(0, 12):
            assert coin_piles(a, b) == _can_empty(a, b)


@pytest.mark.parametrize("text", ["AAAACACBA", "ABBA", "XYZZYXQ", "Q"])
def test_palindrome_reorder_valid(text):
    result = palindrome_reorder(text)
    assert result == result[::-1]
    assert sorted(result) == sorted(text)


@pytest.mark.parametrize("text", ["ABC", "AABC", "AB"])
def test_palindrome_reorder_impossible(text):
    assert palindrome_reorder(text) is None


def test_gray_code_base():
    assert gray_code(1) == ["0", "1"]


@pytest.mark.parametrize("n", [2, 3, 5])
def test_gray_code_properties(n):
    codes = gray_code(n)
    assert len(set(codes)) == 2 ** n
    assert all(len(code) == n for code in codes)
    for a, b in zip(codes, codes[1:]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_gray_code_rejects_zero():
    with pytest.raises(ValueError):
        gray_code(0)


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_tower_of_hanoi_is_valid(n):
    moves = tower_of_hanoi(n)
    assert len(moves) == 2 ** n - 1
    towers = {1: list(range(n, 0, -1)), 2: [], 3: []}
    for start, end in moves:
        disc = towers[start].pop()
        assert not towers[end] or towers[end][-1] > disc
        towers[end].append(disc)
    assert towers[3] == list(range(n, 0, -1))


def test_tower_of_hanoi_single():
    assert tower_of_hanoi(1) == [(1, 3)]


def test_digit_query_matches_concatenation():
    text = "".join(str(i) for i in range(1, 5000))
    for k in list(range(1, 300)) + [1000, 2889, 2890, 5000, 12000]:
        assert digit_query(k) == int(text[k - 1])


def test_digit_query_rejects_zero():
    with pytest.raises(ValueError):
        digit_query(0)