"""Puzzles on graphs and trees: mutations, course plans, robbing a tree, tilings."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_BASES = "ACGT"
_PAIRED_CORNERS = frozenset({3, 5, 10, 12, 15})


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def min_mutation(start: str, end: str, bank: Iterable[str]) -> int:
    """Return the fewest single-base mutations from start to end, or -1.

    Every intermediate gene, and the end gene, must be in the bank.
    """
    allowed = set(bank)
    if end not in allowed:
        return -1
    seen = {start}
    frontier = deque([(start, 0)])
    while frontier:
        gene, steps = frontier.popleft()
        if gene == end:
            return steps
        for position in range(len(gene)):
            for base in _BASES:
                candidate = gene[:position] + base + gene[position + 1 :]
                if candidate in allowed and candidate not in seen:
                    seen.add(candidate)
                    frontier.append((candidate, steps + 1))
    return -1


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken given (course, prerequisite) pairs."""
    unlocks: list[list[int]] = [[] for _ in range(num_courses)]
    pending = [0] * num_courses
    for course, prerequisite in prerequisites:
        unlocks[prerequisite].append(course)
        pending[course] += 1
    ready = deque(course for course in range(num_courses) if pending[course] == 0)
    taken = 0
    while ready:
        course = ready.popleft()
        taken += 1
        for follower in unlocks[course]:
            pending[follower] -= 1
            if pending[follower] == 0:
                ready.append(follower)
    return taken == num_courses


def rob(root: TreeNode | None) -> int:
    """Return the largest sum of node values with no parent and child both chosen."""
    if root is None:
        return 0
    results: dict[int, tuple[int, int]] = {}
    stack: list[tuple[TreeNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, False))
            continue
        take, skip = node.val, 0
        for child in (node.left, node.right):
            if child is None:
                continue
            child_take, child_skip = results.pop(id(child))
            take += child_skip
            skip += max(child_take, child_skip)
        results[id(node)] = (take, skip)
    return max(results[id(root)])


def is_rectangle_cover(rectangles: Iterable[Sequence[int]]) -> bool:
    """Tell whether the rectangles (x1, y1, x2, y2) tile one rectangle exactly."""
    corners: defaultdict[tuple[int, int], int] = defaultdict(int)
    for x1, y1, x2, y2 in rectangles:
        for bit, point in ((1, (x1, y1)), (2, (x1, y2)), (4, (x2, y1)), (8, (x2, y2))):
            if corners[point] & bit:
                return False
            corners[point] |= bit
    lone_corners = 0
    for mask in corners.values():
        if mask & (mask - 1) == 0:
            lone_corners += 1
            if lone_corners > 4:
                return False
        elif mask not in _PAIRED_CORNERS:
            return False
    return True