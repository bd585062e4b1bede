import pytest

from algodrills.trees import (
    TreeNode,
    add_one_row,
    build_tree,
    invert_tree,
    is_leaf,
    sum_numbers,
    tree_values,
)


@pytest.mark.parametrize(
    "values",
    [[1], [1, 2, 3], [1, 2, 3, None, 4], [4, 2, 6, 3, 1, 5], [1, None, 2, None, 3]],
)
def test_build_and_read_round_trip(values):
    assert tree_values(build_tree(values)) == values


def test_empty_tree():
    assert build_tree([]) is None
    assert tree_values(None) == []


def test_is_leaf():
    root = build_tree([1, 2])
    assert is_leaf(root.left) is True
    assert is_leaf(root) is False


def test_sum_numbers_small_tree():
    assert sum_numbers(build_tree([1, 2, 3])) == 25


def test_sum_numbers_deeper_tree():
    assert sum_numbers(build_tree([4, 9, 0, 5, 1])) == 1026


def test_sum_numbers_single_node_and_empty():
    assert sum_numbers(TreeNode(7)) == 7
    assert sum_numbers(None) == 0


def test_invert_full_tree_reverses_each_level():
    root = invert_tree(build_tree([1, 2, 3, 4, 5, 6, 7]))
    assert tree_values(root) == [1, 3, 2, 7, 6, 5, 4]


def test_invert_twice_is_identity():
    values = [4, 2, 7, 1, 3, 6, 9, None, 8]
    root = build_tree(values)
    assert invert_tree(invert_tree(root)) is root
    assert tree_values(root) == values


def test_invert_none():
    assert invert_tree(None) is None


def test_add_row_at_depth_one_makes_new_root():
    old = build_tree([4, 2, 6])
    new = add_one_row(old, 1, 1)
    assert new.val == 1
    assert new.left is old
    assert new.right is None


def test_add_row_at_depth_two():
    root = build_tree([4, 2, 6])
    left, right = root.left, root.right
    result = add_one_row(root, 1, 2)
    assert result is root
    assert root.left.val == 1 and root.right.val == 1
    assert root.left.left is left and root.left.right is None
    assert root.right.right is right and root.right.left is None


def test_add_row_deeper_keeps_sides():
    root = build_tree([4, 2, None, 3, 1])
    add_one_row(root, 1, 3)
    assert root.left.left.val == 1 and root.left.left.left.val == 3
    assert root.left.right.val == 1 and root.left.right.right.val == 1


def test_add_row_beyond_height_changes_nothing():
    values = [4, 2, 6, 3, 1, 5]
    root = add_one_row(build_tree(values), 9, 10)
    assert tree_values(root) == values


def test_add_row_to_empty_tree():
    assert add_one_row(None, 5, 1) is None