"""Puzzles about strings and sequences of tokens."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def prefix_function(word: str) -> list[int]:
    """Return, for each position, the length of the longest proper border."""
    borders = [0] * len(word)
    matched = 0
    for index, char in enumerate(word[1:], start=1):
        while matched and char != word[matched]:
            matched = borders[matched - 1]
        if char == word[matched]:
            matched += 1
        borders[index] = matched
    return borders


def longest_prefix(s: str) -> str:
    """Return the longest proper prefix of s that is also a suffix."""
    if not s:
        return ""
    return s[: prefix_function(s)[-1]]


def custom_sort_string(order: str, s: str) -> str:
    """Reorder s so that letters follow ``order``; the rest come after, alphabetically."""
    counts = Counter(s)
    pieces = [char * counts.pop(char, 0) for char in order]
    pieces.extend(char * counts[char] for char in sorted(counts))
    return "".join(pieces)


def has_all_codes(s: str, k: int) -> bool:
    """Tell whether every binary code of length k is a substring of s."""
    if k > len(s):
        return False
    codes = {s[start : start + k] for start in range(len(s) - k + 1)}
    return len(codes) == 2**k


def number_of_substrings(s: str) -> int:
    """Count the substrings of s holding at least one each of 'a', 'b' and 'c'."""
    last_seen = {"a": -1, "b": -1, "c": -1}
    total = 0
    for index, char in enumerate(s):
        if char not in last_seen:
            raise ValueError(f"unexpected character {char!r}")
        last_seen[char] = index
        total += min(last_seen.values()) + 1
    return total


def smallest_trimmed_numbers(
    nums: Sequence[str], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer each (k, trim) query with the index of the k-th smallest trimmed number."""
    answers = []
    for k, trim in queries:
        trimmed = []
        for index, number in enumerate(nums):
            if trim > len(number):
                raise ValueError(f"cannot keep {trim} digits of {number!r}")
            digits = number[len(number) - trim :]
            if digits:
                trimmed.append((digits, index))
        if not 1 <= k <= len(trimmed):
            raise ValueError(f"query rank {k} is out of range")
        trimmed.sort()
        answers.append(trimmed[k - 1][1])
    return answers


def top_k_frequent(words: Iterable[str], k: int) -> list[str]:
    """Return the k most frequent words, ties broken alphabetically."""
    counts = Counter(words)
    if k > len(counts):
        raise ValueError(f"only {len(counts)} distinct words, asked for {k}")
    ranked = sorted(counts, key=lambda word: (-counts[word], word))
    return ranked[: max(k, 0)]


def count_distinct(nums: Sequence[int], k: int, p: int) -> int:
    """Count distinct subarrays with at most k elements divisible by p."""
    seen: set[tuple[int, ...]] = set()
    for start in range(len(nums)):
        divisible = 0
        for end in range(start, len(nums)):
            if nums[end] % p == 0:
                divisible += 1
            if divisible > k:
                break
            seen.add(tuple(nums[start : end + 1]))
    return len(seen)