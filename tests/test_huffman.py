import pytest

from dskit.huffman import HuffmanNode, build_huffman_tree, huffman_codes, render_tree

SAMPLE = {"a": 45, "b": 13, "c": 12, "d": 16, "e": 9, "f": 5}


def _nodes(root):
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def test_root_weight_is_total_weight():
    root = build_huffman_tree(SAMPLE)
    assert root.weight == sum(SAMPLE.values())


def test_inner_weights_are_sums_of_children():
    root = build_huffman_tree(SAMPLE)
    for node in _nodes(root):
        if not node.is_leaf:
            assert node.weight == node.left.weight + node.right.weight
            assert node.left.weight <= node.right.weight


def test_codes_cover_every_symbol_and_are_prefix_free():
    codes = huffman_codes(build_huffman_tree(SAMPLE))
    assert set(codes) == set(SAMPLE)
    values = list(codes.values())
    for i, first in enumerate(values):
        for j, second in enumerate(values):
            if i != j:
                assert not second.startswith(first)


def test_encoded_length_equals_sum_of_inner_weights():
    root = build_huffman_tree(SAMPLE)
    codes = huffman_codes(root)
    inner = sum(node.weight for node in _nodes(root) if not node.is_leaf)
    assert sum(SAMPLE[s] * len(code) for s, code in codes.items()) == inner


def test_heavier_symbols_get_no_longer_codes():
    codes = huffman_codes(build_huffman_tree(SAMPLE))
    for s, ws in SAMPLE.items():
        for t, wt in SAMPLE.items():
            if ws > wt:
                assert len(codes[s]) <= len(codes[t])


def test_pairs_and_mapping_give_same_codes():
    assert huffman_codes(build_huffman_tree(SAMPLE)) == huffman_codes(
        build_huffman_tree(list(SAMPLE.items()))
    )


def test_single_symbol_gets_empty_code():
    root = build_huffman_tree({"x": 7})
    assert root == HuffmanNode(7, "x")
    assert huffman_codes(root) == {"x": ""}


def test_empty_input():
    assert build_huffman_tree({}) is None
    assert huffman_codes(None) == {}
    assert render_tree(None) == ""


def test_render_single_leaf():
    assert render_tree(build_huffman_tree({"a": 5})) == "└──'a' (5)"


def test_render_two_leaves():
    root = build_huffman_tree({"a": 1, "b": 2})
    assert render_tree(root).splitlines() == [
        "└──Node (3)",
        "    ├──'a' (1)",
        "    └──'b' (2)",
    ]


@pytest.mark.parametrize("weights", [SAMPLE, {"p": 1, "q": 1, "r": 1, "s": 1}])
def test_render_has_one_line_per_node(weights):
    root = build_huffman_tree(weights)
    assert len(render_tree(root).splitlines()) == sum(1 for _ in _nodes(root))