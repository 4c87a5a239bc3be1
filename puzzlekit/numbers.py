"""Puzzles about integers: counting, primes, probabilities and divisibility."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _count_with_prefix(prefix: int, n: int) -> int:
    """Count the integers in [1, n] whose decimal form starts with ``prefix``."""
    count = 0
    low, width = prefix, 1
    while low <= n:
        count += min(width, n - low + 1)
        low *= 10
        width *= 10
    return count


def find_kth_number(n: int, k: int) -> int:
    """Return the k-th smallest integer in [1, n] in lexicographic order."""
    current = 1
    while k > 1:
        subtree = _count_with_prefix(current, n)
        if k > subtree:
            k -= subtree
            current += 1
        else:
            k -= 1
            current *= 10
    return current


def _prime_flags(limit: int) -> list[bool]:
    flags = [True] * (limit + 1)
    for small in range(min(limit, 1) + 1):
        flags[small] = False
    factor = 2
    while factor * factor <= limit:
        if flags[factor]:
            flags[factor * factor :: factor] = [False] * len(
                range(factor * factor, limit + 1, factor)
            )
        factor += 1
    return flags


def closest_primes(left: int, right: int) -> list[int]:
    """Return the first pair of primes in [left, right] with the smallest gap.

    ``[-1, -1]`` is returned when the range holds fewer than two primes.
    """
    if right < 2:
        return [-1, -1]
    flags = _prime_flags(right)
    primes = [value for value in range(max(left, 0), right + 1) if flags[value]]
    if len(primes) < 2:
        return [-1, -1]
    low, high = min(zip(primes, primes[1:]), key=lambda pair: pair[1] - pair[0])
    return [low, high]


def find_the_winner(n: int, k: int) -> int:
    """Return the survivor (1-based) of the Josephus circle of n friends counting k."""
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position + 1


def nth_person_gets_nth_seat(n: int) -> float:
    """Probability that the last passenger gets their own seat.

    The first passenger takes their own seat with probability 1/size, or the
    seat of passenger m, which leaves the same problem with size - m + 1 seats.
    """
    if n == 1:
        return 1.0
    probability = 0.5
    smaller_total = 0.0
    for size in range(2, n + 1):
        probability = (1.0 + smaller_total) / size
        smaller_total += probability
    return probability


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Probability of ending with at most n points when drawing until k or more."""
    if k == 0:
        return 1.0
    dp = [0.0] * (max(n, max_pts) + 1)
    for points in range(1, max_pts + 1):
        dp[points] = 1.0 / max_pts
    window = 0.0
    for points in range(1, n + 1):
        dp[points] += window
        if points < k:
            window += dp[points] / max_pts
        if max_pts < points < max_pts + k:
            window -= dp[points - max_pts] / max_pts
    return sum(dp[k : n + 1])


def max_rotate_function(nums: Sequence[int]) -> int:
    """Return the maximum of F(r) = sum(i * rotated[i]) over all rotations."""
    size = len(nums)
    if size == 0:
        return 0
    total = sum(nums)
    value = sum(index * item for index, item in enumerate(nums))
    best = value
    for item in reversed(nums[1:]):
        value += total - size * item
        best = max(best, value)
    return best


def max_consecutive(bottom: int, top: int, special: Iterable[int]) -> int:
    """Return the longest run of non-special floors between bottom and top."""
    floors = sorted(special)
    if not floors:
        raise ValueError("at least one special floor is required")
    best = max(floors[0] - bottom, top - floors[-1])
    for lower, upper in zip(floors, floors[1:]):
        best = max(best, upper - lower - 1)
    return best


def largest_divisible_subset(nums: Iterable[int]) -> list[int]:
    """Return a largest subset in which every pair divides one another.

    The subset is listed from its largest element down to its smallest.
    """
    values = sorted(nums)
    if not values:
        return []
    lengths = [1] * len(values)
    parents = list(range(len(values)))
    best_length, best_index = 1, 0
    for index, value in enumerate(values):
        for previous, divisor in enumerate(values[:index]):
            if value % divisor == 0 and lengths[index] < lengths[previous] + 1:
                lengths[index] = lengths[previous] + 1
                parents[index] = previous
        if lengths[index] > best_length:
            best_length, best_index = lengths[index], index
    subset = [values[best_index]]
    while parents[best_index] != best_index:
        best_index = parents[best_index]
        subset.append(values[best_index])
    return subset