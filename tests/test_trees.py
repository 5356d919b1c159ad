import pytest

from coredrills.trees import (
    TreeNode,
    bfs,
    deserialize,
    dfs_preorder,
    level_order_with_nulls,
    serialize,
)


def letter_tree():
    #      A
    #     / \
    #    B   C
    #   / \   \
    #  D   E   F
    return TreeNode(
        "A",
        TreeNode("B", TreeNode("D"), TreeNode("E")),
        TreeNode("C", None, TreeNode("F")),
    )


def number_tree():
    return TreeNode(1, TreeNode(2), TreeNode(3, TreeNode(4), TreeNode(5)))


def test_bfs_visits_by_level():
    assert list(bfs(letter_tree())) == ["A", "B", "C", "D", "E", "F"]


def test_dfs_is_preorder():
    assert list(dfs_preorder(letter_tree())) == ["A", "B", "D", "E", "C", "F"]


def test_traversals_of_empty_tree():
    assert list(bfs(None)) == []
    assert list(dfs_preorder(None)) == []


def test_traversals_visit_same_nodes():
    root = letter_tree()
    assert sorted(bfs(root)) == sorted(dfs_preorder(root))


def test_serialize_format():
    assert serialize(number_tree()) == "1 2 N N 3 4 N N 5 N N "


def test_round_trip():
    root = number_tree()
    assert deserialize(serialize(root)) == root


def test_round_trip_negative_and_skewed():
    root = TreeNode(-7, TreeNode(-3, TreeNode(0, TreeNode(12))))
    assert deserialize(serialize(root)) == root


def test_empty_tree_codec():
    assert serialize(None) == "N "
    assert deserialize(serialize(None)) is None


@pytest.mark.parametrize("data", ["", "1 2", "1 N", "x N N"])
def test_deserialize_rejects_bad_input(data):
    with pytest.raises(ValueError):
        deserialize(data)


def test_level_order_with_nulls_matches_bfs():
    root = number_tree()
    levels = level_order_with_nulls(root)
    assert [v for v in levels if v is not None] == list(bfs(root))
    # One null slot per missing child: a tree of n nodes has n + 1 of them.
    assert levels.count(None) == len(list(bfs(root))) + 1


def test_level_order_with_nulls_empty():
    assert level_order_with_nulls(None) == []