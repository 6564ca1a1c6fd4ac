import pytest

from algonotes.trees import BSTIterator, TreeNode, right_side_view


def _source_bst():
    return TreeNode(
        5,
        TreeNode(3, TreeNode(1), TreeNode(4)),
        TreeNode(7, TreeNode(6), TreeNode(8)),
    )


def _collect(root, out):
    if root is not None:
        out.append(root.val)
        _collect(root.left, out)
        _collect(root.right, out)
    return out


def test_bst_iterator_yields_sorted_values():
    root = _source_bst()
    assert list(BSTIterator(root)) == sorted(_collect(root, []))


def test_bst_iterator_has_next_tracks_exhaustion():
    iterator = BSTIterator(TreeNode(2, TreeNode(1)))
    seen = []
    while iterator.has_next():
        seen.append(next(iterator))
    assert seen == [1, 2]
    assert iterator.has_next() is False


def test_bst_iterator_empty_tree():
    iterator = BSTIterator(None)
    assert iterator.has_next() is False
    with pytest.raises(StopIteration):
        next(iterator)


def test_bst_iterator_right_chain():
    root = TreeNode(1, right=TreeNode(2, right=TreeNode(3)))
    assert list(BSTIterator(root)) == [1, 2, 3]


def test_right_side_view_source_example():
    n4 = TreeNode(4)
    n5 = TreeNode(5)
    root = TreeNode(1, TreeNode(2, right=n5), TreeNode(3, right=n4))
    assert right_side_view(root) == [1, 3, 4]


def test_right_side_view_empty():
    assert right_side_view(None) == []


def test_right_side_view_single_node():
    assert right_side_view(TreeNode(9)) == [9]


def test_right_side_view_left_chain():
    root = TreeNode(1, TreeNode(2, TreeNode(3)))
    assert right_side_view(root) == [1, 2, 3]


def test_right_side_view_length_is_depth():
    root = _source_bst()
    assert len(right_side_view(root)) == 3
    assert right_side_view(root)[0] == root.val