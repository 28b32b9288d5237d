"""
Huffman coding algorithm -
frequency analysis, tree construction and prefix codes
"""

import heapq
from collections import Counter

from huffman_errors import EmptyInputError

# Merged nodes are ranked after every possible leaf symbol.
FIRST_INTERNAL_RANK = 256


class Node:
    """
    Class object for Node in Huffman's Tree.
    A node without children is a leaf and holds a symbol.
    """

    def __init__(self, value=None, val_freq: int = 0, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param value: int, byte held by a leaf, None for internal nodes
        :param val_freq: int, weight of the node, used only while building
        :param left: left child
        :param right: right child
        """
        self.left = left
        self.right = right
        self.value = value
        self.val_freq = val_freq

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"Node(value={self.value!r})"
        return f"Node(left={self.left!r}, right={self.right!r})"


def char_frequency(data: bytes) -> dict[int, int]:
    """
    Function builds dictionary with frequency
    of each byte for given data.

    :param data: bytes to count symbol frequency for
    :return: dict, only symbols present in data
    """
    return dict(Counter(data))


def analyze(data: bytes) -> dict[int, int]:
    """Frequency table of data, as consumed by the reporting layer."""
    return char_frequency(data)


class HuffmanTree:
    """
    Class object for Huffman Tree - main structure used
    in Huffman coding algorithm. Holds the root and the
    code table generated from it.
    """

    def __init__(self, root: Node | None = None):
        self.root = root
        self.res_codes: dict[int, str] = {}
        self.char_frequency_dict: dict[int, int] = {}

    @classmethod
    def build_from_freq(cls, freq_dict: dict[int, int]) -> "HuffmanTree":
        """
        Builds Huffman tree from a frequency dictionary,
        generates prefix codes and returns the instance.

        Heap entries are ordered by (weight, rank). Leaves are ranked by
        their symbol value, merged nodes by creation order starting at 256.
        The first node popped becomes the left child, so the same table
        always produces the same tree.

        :param freq_dict: dict {symbol: frequency}
        :return: HuffmanTree with root and res_codes filled
        """
        if not freq_dict:
            raise EmptyInputError("Cannot build a Huffman tree from empty input")

        tree = cls()
        tree.char_frequency_dict = dict(freq_dict)

        nodes = [
            (val_freq, val, Node(val, val_freq))
            for val, val_freq in sorted(freq_dict.items())
        ]
        heapq.heapify(nodes)

        if len(nodes) == 1:
            # a lone symbol still needs a one-bit code
            val_freq, _, single = nodes[0]
            tree.root = Node(None, val_freq, left=single)
        else:
            next_rank = FIRST_INTERNAL_RANK
            while len(nodes) > 1:
                l_freq, _, l = heapq.heappop(nodes)
                r_freq, _, r = heapq.heappop(nodes)
                merged = Node(None, l_freq + r_freq, left=l, right=r)
                heapq.heappush(nodes, (merged.val_freq, next_rank, merged))
                next_rank += 1
            tree.root = nodes[0][2]

        tree.codes_generation()
        return tree

    @classmethod
    def build_from_data(cls, data: bytes) -> "HuffmanTree":
        return cls.build_from_freq(char_frequency(data))

    def codes_generation(self, node=None, curr_code=""):
        """
        Recursive function that generates
        code for each symbol, preorder traversal of Huffman's tree

        :param node: node to start traversal from
        :param curr_code: str, current code of a symbol
        """
        if node is None:
            node = self.root
            self.res_codes = {}
            if node is None:
                return self.res_codes

        if node.is_leaf():
            self.res_codes[node.value] = curr_code or "0"
            return self.res_codes

        if node.left is not None:
            self.codes_generation(node.left, curr_code + "0")
        if node.right is not None:
            self.codes_generation(node.right, curr_code + "1")
        return self.res_codes

    def encoded_bit_length(self) -> int:
        """Total number of payload bits, sum of freq * code length."""
        return sum(
            val_freq * len(self.res_codes[val])
            for val, val_freq in self.char_frequency_dict.items()
        )
