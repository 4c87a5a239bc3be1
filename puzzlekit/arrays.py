"""Puzzles over integer arrays: windows, counting pairs, searching and shopping."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Sequence
from functools import lru_cache
from heapq import heapify, heappop, heappush


def find_unsorted_subarray(nums: Sequence[int]) -> int:
    """Return the length of the shortest window whose sorting sorts all of nums."""
    if not nums:
        return 0
    end, start = -1, 0

    running_max = nums[0]
    for index, value in enumerate(nums[1:], start=1):
        if running_max > value:
            end = index
        else:
            running_max = value

    running_min = nums[-1]
    for index in reversed(range(len(nums) - 1)):
        value = nums[index]
        if running_min < value:
            start = index
        else:
            running_min = value

    return end - start + 1


def rearrange_barcodes(barcodes: Sequence[int]) -> list[int]:
    """Arrange barcodes so that no two neighbours are equal.

    The most frequent code is placed first whenever it may be; ties go to the
    larger code.
    """
    heap = [(-count, -code) for code, count in Counter(barcodes).items()]
    heapify(heap)
    arranged: list[int] = []
    while heap:
        count, code = heappop(heap)
        if not arranged or arranged[-1] != -code or not heap:
            arranged.append(-code)
            if count + 1:
                heappush(heap, (count + 1, code))
        else:
            second_count, second_code = heappop(heap)
            heappush(heap, (count, code))
            arranged.append(-second_code)
            if second_count + 1:
                heappush(heap, (second_count + 1, second_code))
    return arranged


def total_fruit(fruits: Sequence[int]) -> int:
    """Return the longest run of trees holding at most two kinds of fruit."""
    kinds: set[int] = set()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        if fruit not in kinds:
            if len(kinds) == 2:
                last = fruits[right - 1]
                boundary = right - 1
                while boundary >= 0 and fruits[boundary] == last:
                    boundary -= 1
                if boundary >= 0:
                    kinds.discard(fruits[boundary])
                left = boundary + 1
            kinds.add(fruit)
        best = max(best, right + 1 - left)
    return best


def number_of_pairs(nums1: Sequence[int], nums2: Sequence[int], diff: int) -> int:
    """Count pairs i < j with nums1[i] - nums1[j] <= nums2[i] - nums2[j] + diff."""
    differences = [a - b for a, b in zip(nums1, nums2, strict=True)]
    keys = sorted(set(differences))
    tree = [0] * (len(keys) + 1)
    pairs = 0
    for value in differences:
        position = bisect_right(keys, value + diff)
        while position > 0:
            pairs += tree[position]
            position -= position & -position
        position = bisect_left(keys, value) + 1
        while position <= len(keys):
            tree[position] += 1
            position += position & -position
    return pairs


def _search(mountain: Sequence[int], target: int, low: int, high: int, ascending: bool) -> int:
    while low <= high:
        middle = (low + high) // 2
        value = mountain[middle]
        if value == target:
            return middle
        if (value < target) == ascending:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def find_in_mountain_array(target: int, mountain: Sequence[int]) -> int:
    """Return the smallest index of target in a mountain sequence, or -1.

    A mountain rises strictly to a single peak and then falls strictly.
    """
    size = len(mountain)
    if size == 0:
        return -1
    low, high = 0, size - 1
    while low < high:
        middle = (low + high) // 2
        if mountain[middle] < mountain[middle + 1]:
            low = middle + 1
        else:
            high = middle
    peak = low
    found = _search(mountain, target, 0, peak, ascending=True)
    if found != -1:
        return found
    return _search(mountain, target, peak, size - 1, ascending=False)


def shopping_offers(
    price: Sequence[int], special: Sequence[Sequence[int]], needs: Sequence[int]
) -> int:
    """Return the lowest cost of buying exactly ``needs`` using prices and offers.

    Each offer lists a quantity per item followed by the offer's price.
    """
    item_count = len(price)
    offers = [tuple(offer) for offer in special]

    @lru_cache(maxsize=None)
    def cheapest(offer_index: int, wanted: tuple[int, ...]) -> int:
        if offer_index == len(offers):
            return sum(amount * cost for amount, cost in zip(wanted, price))
        offer = offers[offer_index]
        remaining = tuple(want - take for want, take in zip(wanted, offer[:item_count]))
        skip = cheapest(offer_index + 1, wanted)
        if any(amount < 0 for amount in remaining):
            return skip
        return min(skip, cheapest(offer_index, remaining) + offer[item_count])

    return cheapest(0, tuple(needs))