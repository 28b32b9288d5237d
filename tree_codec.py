"""
Serialization of Huffman trees for the HUF1 container.

The tree is written in pre-order with one marker byte per node:
b'1' followed by the symbol byte for a leaf, b'0' followed by the
left and right subtrees for an internal node.
"""

from huffman_coding import Node
from huffman_errors import MalformedTreeError


class TreeCodec:
    """Writes and reads the pre-order tree description."""

    LEAF_MARKER = ord("1")
    INTERNAL_MARKER = ord("0")

    @staticmethod
    def serialize(root: Node) -> bytes:
        """
        Serialize the tree rooted at root.

        A root with a single child (one distinct symbol) is written as
        that leaf alone; deserialize() restores the wrapped shape.

        Args:
            root: Root node of a tree built by HuffmanTree

        Returns:
            The serialized tree, without terminator
        """
        out = bytearray()
        if root.right is None and root.left is not None and root.left.is_leaf():
            TreeCodec._write_node(root.left, out)
        else:
            TreeCodec._write_node(root, out)
        return bytes(out)

    @staticmethod
    def _write_node(node: Node, out: bytearray):
        if node.is_leaf():
            out.append(TreeCodec.LEAF_MARKER)
            out.append(node.value)
            return
        if node.left is None or node.right is None:
            raise MalformedTreeError("Internal node must have two children")
        out.append(TreeCodec.INTERNAL_MARKER)
        TreeCodec._write_node(node.left, out)
        TreeCodec._write_node(node.right, out)

    @staticmethod
    def deserialize(data: bytes, offset: int = 0) -> tuple[Node, int]:
        """
        Rebuild a tree from data starting at offset.

        Reads exactly the bytes serialize() produced and nothing after.

        Args:
            data: Buffer holding the serialized tree
            offset: Position of the first marker byte

        Returns:
            Tuple (root, offset just past the tree)

        Raises:
            MalformedTreeError: On truncation, an unknown marker or a
                symbol that appears in two leaves
        """
        pos = offset
        end = len(data)
        root = None
        pending = []  # internal nodes still missing a child
        seen = set()

        while True:
            if pos >= end:
                raise MalformedTreeError("Tree description ended unexpectedly")
            marker = data[pos]
            pos += 1

            if marker == TreeCodec.LEAF_MARKER:
                if pos >= end:
                    raise MalformedTreeError("Leaf marker without a symbol byte")
                symbol = data[pos]
                pos += 1
                if symbol in seen:
                    raise MalformedTreeError(f"Symbol {symbol} appears in two leaves")
                seen.add(symbol)
                node = Node(symbol)
            elif marker == TreeCodec.INTERNAL_MARKER:
                node = Node()
            else:
                raise MalformedTreeError(
                    f"Unknown tree marker 0x{marker:02X} at offset {pos - 1}"
                )

            if not pending:
                root = node
            else:
                parent = pending[-1]
                if parent.left is None:
                    parent.left = node
                else:
                    parent.right = node
                    pending.pop()

            if marker == TreeCodec.INTERNAL_MARKER:
                pending.append(node)
            if not pending:
                break

        if root.is_leaf():
            root = Node(None, left=root)
        return root, pos
