import pytest

from arbor.binary_tree import BinaryTree


def build_sample():
    tree = BinaryTree()
    root = tree.insert_root(1)
    two = tree.insert_left(root, 2)
    three = tree.insert_right(root, 3)
    tree.insert_left(two, 4)
    five = tree.insert_right(two, 5)
    tree.insert_right(three, 6)
    tree.insert_right(five, 7)
    return tree


def test_empty_tree():
    tree = BinaryTree()
    assert tree.is_empty()
    assert list(tree.preorder(tree.root)) == []
    assert list(tree.bfs_levels(tree.root)) == []
    assert tree.render(tree.root) == ""


def test_breadth_first_sample():
    tree = build_sample()
    assert list(tree.breadth_first(tree.root)) == [1, 2, 3, 4, 5, 6, 7]


def test_preorder_sample():
    tree = build_sample()
    assert list(tree.preorder(tree.root)) == [1, 2, 4, 5, 7, 3, 6]


def test_inorder_sample():
    tree = build_sample()
    assert list(tree.inorder(tree.root)) == [4, 2, 5, 7, 1, 3, 6]


def test_postorder_reverses_mirrored_preorder():
    tree = build_sample()
    post = list(tree.postorder(tree.root))
    assert post[-1] == 1
    assert sorted(post) == list(range(1, 8))
    assert post.index(7) < post.index(5) < post.index(2)


def test_levels_agree_between_dfs_and_bfs():
    tree = build_sample()
    dfs = list(tree.dfs_levels(tree.root, 0))
    bfs = list(tree.bfs_levels(tree.root))
    assert sorted(dfs) == sorted(bfs)
    levels = [level for _, level in bfs]
    assert levels == sorted(levels)
    assert bfs[0] == (1, 0)
    assert [v for v, _ in dfs] == list(tree.preorder(tree.root))


def test_dfs_levels_offset():
    tree = build_sample()
    base = dict(tree.dfs_levels(tree.root, 0))
    shifted = dict(tree.dfs_levels(tree.root, 5))
    assert all(shifted[v] == base[v] + 5 for v in base)


def test_parent_links():
    tree = build_sample()
    root = tree.root
    assert tree.parent(root) is None
    assert tree.parent(root.left) is root
    assert tree.parent(root.left.right.right) is root.left.right


def test_duplicate_children_rejected():
    tree = BinaryTree()
    root = tree.insert_root(1)
    tree.insert_left(root, 2)
    tree.insert_right(root, 3)
    with pytest.raises(ValueError):
        tree.insert_root(9)
    with pytest.raises(ValueError):
        tree.insert_left(root, 9)
    with pytest.raises(ValueError):
        tree.insert_right(root, 9)
    assert (root.value, root.left.value, root.right.value) == (1, 2, 3)


def test_remove_subtree():
    tree = build_sample()
    tree.remove_subtree(tree.root.left)
    assert list(tree.preorder(tree.root)) == [1, 3, 6]
    assert tree.root.left is None
    tree.remove_subtree(tree.root.right.right)
    assert tree.root.right.is_leaf()
    tree.remove_subtree(tree.root)
    assert tree.is_empty()


def test_render_layout():
    tree = build_sample()
    text = tree.render(tree.root, 0)
    lines = text.splitlines()
    assert [line.strip() for line in lines] == [str(v) for v in tree.preorder(tree.root)]
    assert lines[0] == "1"
    indents = {line.strip(): len(line) - len(line.lstrip()) for line in lines}
    levels = dict(tree.dfs_levels(tree.root, 0))
    for a in indents:
        for b in indents:
            if levels[int(a)] < levels[int(b)]:
                assert indents[a] < indents[b]