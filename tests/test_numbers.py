import itertools

import pytest

from puzzlekit.numbers import (
    closest_primes,
    find_kth_number,
    find_the_winner,
    largest_divisible_subset,
    max_consecutive,
    max_rotate_function,
    new21_game,
    nth_person_gets_nth_seat,
)


def _is_prime(value):
    return value >= 2 and all(value % d for d in range(2, int(value**0.5) + 1))


@pytest.mark.parametrize("n", [1, 9, 13, 100, 157])
def test_find_kth_number_matches_lexicographic_order(n):
    ordered = sorted(range(1, n + 1), key=str)
    for k, expected in enumerate(ordered, start=1):
        assert find_kth_number(n, k) == expected


def test_find_kth_number_first_is_one():
    assert find_kth_number(1000, 1) == 1


def test_closest_primes_pinned():
    assert closest_primes(10, 19) == [11, 13]


def test_closest_primes_none_available():
    assert closest_primes(4, 6) == [-1, -1]
    assert closest_primes(0, 1) == [-1, -1]


@pytest.mark.parametrize("left,right", [(1, 50), (20, 100), (90, 200)])
def test_closest_primes_properties(left, right):
    low, high = closest_primes(left, right)
    assert _is_prime(low) and _is_prime(high)
    assert left <= low < high <= right
    primes = [v for v in range(left, right + 1) if _is_prime(v)]
    assert high - low == min(b - a for a, b in zip(primes, primes[1:]))
    assert all(not _is_prime(v) for v in range(low + 1, high))


def test_find_the_winner_pinned():
    assert find_the_winner(5, 2) == 3


@pytest.mark.parametrize("n", [1, 2, 7, 12])
def test_find_the_winner_k_one_leaves_last(n):
    assert find_the_winner(n, 1) == n


@pytest.mark.parametrize("n,k", [(6, 5), (7, 3), (10, 4), (1, 9)])
def test_find_the_winner_simulation(n, k):
    circle = list(range(1, n + 1))
    pos = 0
    while len(circle) > 1:
        pos = (pos + k - 1) % len(circle)
        circle.pop(pos)
    assert find_the_winner(n, k) == circle[0]


def test_nth_person_gets_nth_seat():
    assert nth_person_gets_nth_seat(1) == 1.0
    assert nth_person_gets_nth_seat(2) == 0.5
    assert nth_person_gets_nth_seat(1000) == 0.5


def test_new21_game_k_zero_is_certain():
    assert new21_game(0, 0, 5) == 1.0


def test_new21_game_always_within_limit():
    assert new21_game(10, 1, 10) == pytest.approx(1.0)


def test_new21_game_pinned():
    assert new21_game(6, 1, 10) == pytest.approx(0.6)


def test_new21_game_monotone_in_n():
    values = [new21_game(n, 17, 10) for n in range(17, 30)]
    assert all(0.0 <= v <= 1.0 + 1e-9 for v in values)
    assert all(a <= b + 1e-12 for a, b in zip(values, values[1:]))
    assert values[-1] == pytest.approx(1.0)


@pytest.mark.parametrize("nums", [[4, 3, 2, 6], [100], [1, -5, 7, 0, 3], [-2, -3]])
def test_max_rotate_function_against_all_rotations(nums):
    rotations = [nums[-r:] + nums[:-r] if r else nums for r in range(len(nums))]
    best = max(sum(i * x for i, x in enumerate(rot)) for rot in rotations)
    assert max_rotate_function(nums) == best


def test_max_rotate_function_empty():
    assert max_rotate_function([]) == 0


@pytest.mark.parametrize(
    "bottom,top,special", [(2, 9, [4, 6]), (6, 8, [7, 6, 8]), (1, 20, [10]), (3, 30, [29, 5, 17])]
)
def test_max_consecutive_against_scan(bottom, top, special):
    special_set = set(special)
    best = run = 0
    for floor in range(bottom, top + 1):
        run = 0 if floor in special_set else run + 1
        best = max(best, run)
    assert max_consecutive(bottom, top, special) == best


def test_max_consecutive_requires_special():
    with pytest.raises(ValueError):
        max_consecutive(1, 5, [])


@pytest.mark.parametrize("nums", [[1, 2, 3], [1, 2, 4, 8], [3, 4, 16, 8], [5, 9, 18, 54, 90, 7]])
def test_largest_divisible_subset_properties(nums):
    subset = largest_divisible_subset(nums)
    assert set(subset) <= set(nums)
    for a, b in itertools.combinations(subset, 2):
        assert a % b == 0 or b % a == 0
    assert subset == sorted(subset, reverse=True)
    best = max(
        size
        for size in range(1, len(nums) + 1)
        for combo in itertools.combinations(nums, size)
        if all(a % b == 0 or b % a == 0 for a, b in itertools.combinations(combo, 2))
    )
    assert len(subset) == best


def test_largest_divisible_subset_empty():
    assert largest_divisible_subset([]) == []