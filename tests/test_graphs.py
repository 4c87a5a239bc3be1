import pytest

from puzzlekit.graphs import (
    TreeNode,
    can_finish,
    is_rectangle_cover,
    min_mutation,
    rob,
)


def test_min_mutation_single_step():
    assert min_mutation("AACCGGTT", "AACCGGTA", ["AACCGGTA"]) == 1


def test_min_mutation_end_missing_from_bank():
    assert min_mutation("AACCGGTT", "AACCGGTA", []) == -1


def test_min_mutation_chain_length():
    bank = ["CAAAAAAA", "CCAAAAAA", "CCCAAAAA", "CCCCAAAA"]
    assert min_mutation("AAAAAAAA", bank[-1], bank) == len(bank)


def test_min_mutation_unreachable():
    assert min_mutation("AAAAAAAA", "CCAAAAAA", ["CCAAAAAA"]) == -1


def test_min_mutation_takes_shortcut():
    bank = ["CAAAAAAA", "CCAAAAAA", "CCCAAAAA", "ACCAAAAA", "ACAAAAAA"]
    via_long = min_mutation("AAAAAAAA", "CCCAAAAA", bank[:3])
    via_any = min_mutation("AAAAAAAA", "CCCAAAAA", bank)
    assert via_any <= via_long == len(bank[:3])


def test_can_finish_without_prerequisites():
    assert can_finish(3, []) is True


def test_can_finish_chain():
    assert can_finish(4, [[1, 0], [2, 1], [3, 2]]) is True


def test_can_finish_cycle():
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_can_finish_self_loop():
    assert can_finish(1, [[0, 0]]) is False


def test_rob_empty_tree():
    assert rob(None) == 0


def test_rob_single_node():
    node = TreeNode(9)
    assert rob(node) == node.val


def test_rob_parent_and_child():
    root = TreeNode(4, TreeNode(10))
    assert rob(root) == max(root.val, root.left.val)


def test_rob_worked_example():
    root = TreeNode(3, TreeNode(2, None, TreeNode(3)), TreeNode(3, None, TreeNode(1)))
    assert rob(root) == 7


def test_rob_deep_chain_alternates():
    values = list(range(1, 3001))
    root = None
    for value in reversed(values):
        root = TreeNode(value, root)
    assert rob(root) == max(sum(values[0::2]), sum(values[1::2]))


def test_rectangle_cover_single():
    assert is_rectangle_cover([[0, 0, 2, 3]]) is True


def test_rectangle_cover_two_halves():
    assert is_rectangle_cover([[0, 0, 1, 1], [1, 0, 2, 1]]) is True


def test_rectangle_cover_tiling():
    rectangles = [[1, 1, 3, 3], [3, 1, 4, 2], [3, 2, 4, 4], [1, 3, 2, 4], [2, 3, 3, 4]]
    assert is_rectangle_cover(rectangles) is True


def test_rectangle_cover_gap():
    rectangles = [[1, 1, 2, 3], [1, 3, 2, 4], [3, 1, 4, 2], [3, 2, 4, 4]]
    assert is_rectangle_cover(rectangles) is False


def test_rectangle_cover_overlap():
    rectangles = [[1, 1, 3, 3], [3, 1, 4, 2], [1, 3, 2, 4], [2, 2, 4, 4]]
    assert is_rectangle_cover(rectangles) is False


@pytest.mark.parametrize(
    "rectangles",
    [
        [[0, 0, 1, 1], [0, 0, 1, 1]],
        [[0, 0, 2, 2], [0, 0, 1, 1]],
    ],
)
def test_rectangle_cover_duplicates(rectangles):
    assert is_rectangle_cover(rectangles) is False