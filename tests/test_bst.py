import pytest

from dskit.bst import BinarySearchTree

DEMO_VALUES = [20, 10, 30, 5, 15, 25, 35, 10, 30]


@pytest.fixture
def demo_tree():
    return BinarySearchTree(DEMO_VALUES)


def test_inorder_is_sorted_and_deduplicated(demo_tree):
    assert list(demo_tree) == [5, 10, 15, 20, 25, 30, 35]


@pytest.mark.parametrize("value, expected", [(15, True), (100, False), (5, True), (22, False)])
def test_contains(demo_tree, value, expected):
    assert (value in demo_tree) is expected


def test_remove_sequence_from_demo(demo_tree):
    demo_tree.remove(5)
    assert list(demo_tree) == [10, 15, 20, 25, 30, 35]
    demo_tree.remove(15)
    assert list(demo_tree) == [10, 20, 25, 30, 35]
    demo_tree.remove(10)
    assert list(demo_tree) == [20, 25, 30, 35]
    for value in [20, 30, 25, 35]:
        demo_tree.remove(value)
        assert value not in demo_tree
    assert list(demo_tree) == []


def test_remove_node_with_two_children_keeps_order():
    tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80, 35, 45])
    tree.remove(30)
    assert 30 not in tree
    assert list(tree) == [20, 35, 40, 45, 50, 60, 70, 80]
    tree.remove(50)
    assert list(tree) == [20, 35, 40, 45, 60, 70, 80]


def test_remove_missing_value_changes_nothing(demo_tree):
    demo_tree.remove(999)
    assert list(demo_tree) == [5, 10, 15, 20, 25, 30, 35]


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert 1 not in tree
    tree.remove(1)
    assert list(tree) == []


def test_degenerate_tree_handles_many_values():
    tree = BinarySearchTree(range(3000))
    for value in range(0, 3000, 2):
        tree.remove(value)
    assert list(tree) == list(range(1, 3000, 2))
    assert 2999 in tree
    assert 2998 not in tree