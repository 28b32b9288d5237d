import heapq

import pytest

from huffman_coding import HuffmanTree, Node, analyze, char_frequency
from huffman_errors import EmptyInputError


def optimal_cost(freq):
    """Weighted path length of an optimal code: sum of all merge weights."""
    weights = list(freq.values())
    heapq.heapify(weights)
    cost = 0
    while len(weights) > 1:
        merged = heapq.heappop(weights) + heapq.heappop(weights)
        cost += merged
        heapq.heappush(weights, merged)
    return cost


def test_char_frequency_counts_present_symbols_only():
    assert char_frequency(b"aaaabbbcc") == {97: 4, 98: 3, 99: 2}
    assert char_frequency(b"") == {}
    assert analyze(b"\x00\xff\x00") == {0: 2, 255: 1}


def test_empty_table_raises():
    with pytest.raises(EmptyInputError):
        HuffmanTree.build_from_freq({})


def test_aaaabbbcc_codes():
    tree = HuffmanTree.build_from_data(b"aaaabbbcc")
    codes = tree.res_codes
    assert codes == {97: "0", 99: "10", 98: "11"}
    assert len(codes[97]) <= len(codes[98])
    assert len(codes[97]) <= len(codes[99])
    assert tree.encoded_bit_length() == 4 * 1 + 3 * 2 + 2 * 2


def test_equal_weights_follow_symbol_order():
    tree = HuffmanTree.build_from_data(b"dcba")
    assert tree.res_codes == {97: "00", 98: "01", 99: "10", 100: "11"}


def test_build_is_deterministic():
    freq = {sym: (sym * 7) % 13 + 1 for sym in range(256)}
    first = HuffmanTree.build_from_freq(freq).res_codes
    shuffled = dict(sorted(freq.items(), reverse=True))
    assert HuffmanTree.build_from_freq(shuffled).res_codes == first


def test_singleton_tree_is_wrapped():
    tree = HuffmanTree.build_from_freq({65: 10000})
    assert not tree.root.is_leaf()
    assert tree.root.left.value == 65
    assert tree.root.right is None
    assert tree.res_codes == {65: "0"}


def test_leaf_root_gets_non_empty_code():
    tree = HuffmanTree(Node(7))
    assert tree.codes_generation() == {7: "0"}


def test_codes_are_prefix_free_and_optimal():
    data = bytes((i * i + 3 * i) % 251 for i in range(5000)) + b"zzzzzzzzzz"
    freq = char_frequency(data)
    tree = HuffmanTree.build_from_freq(freq)
    codes = list(tree.res_codes.values())

    assert all(codes)
    for a in codes:
        for b in codes:
            if a != b:
                assert not b.startswith(a)
    assert tree.encoded_bit_length() == optimal_cost(freq)


def test_internal_nodes_have_two_children():
    tree = HuffmanTree.build_from_data(bytes(range(256)) * 3 + b"abc")
    stack = [tree.root]
    leaves = []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            leaves.append(node.value)
            continue
        assert node.left is not None and node.right is not None
        stack.extend([node.left, node.right])
    assert sorted(leaves) == list(range(256))
