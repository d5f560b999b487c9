import pytest

from arbor.binary_exams import (
    common_values,
    count_subtrees_with_sum,
    divisible_by_three_at_level,
    even_leaf_count,
    even_leaves,
    even_values,
    increment_even_and_sum,
    increment_sparse,
    leaves_with_even_parent,
    leaves_with_parent_multiple_of_five,
    level_averages,
    make_even,
    odd_at_level,
    subtree_sum,
    sum_leaves_deeper_than,
    transfer_even,
)
from arbor.binary_tree import BinaryTree


@pytest.fixture
def exam_tree():
    #        0
    #      /   \
    #    -6     2
    #      \   / \
    #      11 -4  7
    tree = BinaryTree()
    root = tree.insert_root(0)
    left = tree.insert_left(root, -6)
    right = tree.insert_right(root, 2)
    tree.insert_right(left, 11)
    tree.insert_left(right, -4)
    tree.insert_right(right, 7)
    return tree


@pytest.fixture
def sample_tree():
    tree = BinaryTree()
    root = tree.insert_root(1)
    two = tree.insert_left(root, 2)
    three = tree.insert_right(root, 3)
    tree.insert_left(two, 4)
    five = tree.insert_right(two, 5)
    tree.insert_right(three, 6)
    tree.insert_right(five, 7)
    return tree


def _values(tree):
    return list(tree.inorder(tree.root))


def test_even_values_front_inserted(exam_tree):
    assert list(even_values(exam_tree)) == [2, -4, 0, -6]


def test_even_values_empty_tree():
    assert len(even_values(BinaryTree())) == 0


def test_transfer_even_matches_even_values(exam_tree):
    assert transfer_even(exam_tree) == even_values(exam_tree)


def test_common_values(exam_tree):
    other = BinaryTree()
    root = other.insert_root(11)
    other.insert_left(root, 2)
    other.insert_right(root, 99)
    assert list(common_values(exam_tree, other)) == [2, 11]


def test_common_values_with_empty_tree(exam_tree):
    assert len(common_values(exam_tree, BinaryTree())) == 0
    assert len(common_values(BinaryTree(), exam_tree)) == 0


def test_increment_sparse_sums_changed_nodes(exam_tree, capsys):
    before = _values(exam_tree)
    total = increment_sparse(exam_tree)
    after = _values(exam_tree)
    changed = [new for old, new in zip(before, after) if old != new]
    assert total == sum(changed)
    assert all(new == old + 1 for old, new in zip(before, after) if old != new)
    assert exam_tree.root.value == 0
    assert exam_tree.root.right.value == 2
    assert len(capsys.readouterr().out.splitlines()) == len(before)


def test_level_averages():
    tree = BinaryTree()
    root = tree.insert_root(4)
    tree.insert_left(root, 2)
    tree.insert_right(root, 6)
    assert level_averages(tree) == [pytest.approx(4), pytest.approx(4)]
    assert level_averages(BinaryTree()) == []


def test_level_averages_length_matches_depth(sample_tree):
    levels = {level for _, level in sample_tree.dfs_levels(sample_tree.root)}
    assert len(level_averages(sample_tree)) == len(levels)
    assert level_averages(sample_tree)[0] == pytest.approx(1)


def test_make_even(exam_tree, capsys):
    odd_before = sum(1 for v in _values(exam_tree) if v % 2 != 0)
    assert make_even(exam_tree) == odd_before
    assert all(v % 2 == 0 for v in _values(exam_tree))
    assert "incremented node" in capsys.readouterr().out


def test_increment_even_and_sum(sample_tree):
    before = _values(sample_tree)
    total = increment_even_and_sum(sample_tree)
    after = _values(sample_tree)
    changed = [new for old, new in zip(before, after) if old != new]
    assert total == sum(changed)
    assert all(v % 2 != 0 for v in after)


def test_odd_at_level_totals(sample_tree):
    odd_total = sum(1 for v in _values(sample_tree) if v % 2 != 0)
    assert sum(odd_at_level(sample_tree, k) for k in range(6)) == odd_total


def test_odd_at_level_single_node():
    tree = BinaryTree()
    tree.insert_root(3)
    assert odd_at_level(tree, 0) == 1
    assert odd_at_level(tree, 1) == 0


def test_even_leaves(sample_tree):
    assert even_leaves(sample_tree) == 2
    assert even_leaf_count(sample_tree) == even_leaves(sample_tree)
    assert even_leaf_count(BinaryTree()) == 0


def test_leaves_with_even_parent(sample_tree):
    assert leaves_with_even_parent(sample_tree) == 1


def test_leaves_with_even_parent_root_only():
    tree = BinaryTree()
    tree.insert_root(2)
    assert leaves_with_even_parent(tree) == 0


def test_subtree_sum_of_root(exam_tree):
    assert subtree_sum(exam_tree, exam_tree.root) == sum(_values(exam_tree))
    assert subtree_sum(exam_tree, None) == 0


def test_count_subtrees_with_sum(exam_tree):
    assert count_subtrees_with_sum(exam_tree, 5) == 2
    assert count_subtrees_with_sum(exam_tree, sum(_values(exam_tree))) >= 1
    assert count_subtrees_with_sum(BinaryTree(), 0) == 0


def test_divisible_by_three_at_level(exam_tree):
    assert divisible_by_three_at_level(exam_tree, 0) == 1
    assert divisible_by_three_at_level(exam_tree, 1) == 1
    assert divisible_by_three_at_level(BinaryTree(), 0) == 0


def test_leaves_with_parent_multiple_of_five():
    tree = BinaryTree()
    root = tree.insert_root(10)
    tree.insert_left(root, 1)
    tree.insert_right(root, 2)
    assert leaves_with_parent_multiple_of_five(tree) == 2


def test_leaves_with_parent_multiple_of_five_none(exam_tree):
    assert leaves_with_parent_multiple_of_five(exam_tree) == 0


def test_sum_leaves_deeper_than(exam_tree):
    leaves = exam_tree.root.left.right, exam_tree.root.right.left, exam_tree.root.right.right
    assert sum_leaves_deeper_than(exam_tree, 1) == sum(n.value for n in leaves)
    assert sum_leaves_deeper_than(exam_tree, 2) == 0
    assert sum_leaves_deeper_than(exam_tree, -1) == sum(n.value for n in leaves)