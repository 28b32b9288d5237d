"""
Packing of Huffman codes into bytes and decoding them back
by walking the tree bit by bit.
"""

from bitarray import bitarray

from bit_reader import BitReader
from bit_writer import BitWriter
from huffman_coding import Node
from huffman_errors import InvalidFormatError, MalformedTreeError

# Padding byte written when the last byte is completely used.
NO_PADDING = 8


class HuffmanPacker:
    """Bit packer and unpacker for the HUF1 payload."""

    @staticmethod
    def pack(data: bytes, codes: dict[int, str]) -> tuple[bytes, int]:
        """
        Concatenate the code of every input byte and pad to a full byte.

        Args:
            data: Original bytes
            codes: Code table {symbol: '0'/'1' string}

        Returns:
            Tuple (payload, padding) where padding is 1..7, or NO_PADDING
            when the codes already ended on a byte boundary
        """
        writer = BitWriter()
        writer.write_symbols({sym: bitarray(code) for sym, code in codes.items()}, data)
        added = writer.byte_align()
        return writer.get_bytes(), added or NO_PADDING

    @staticmethod
    def unpack(payload: bytes, padding: int, root: Node, original_size: int) -> bytes:
        """
        Decode exactly original_size symbols from payload.

        Bits left over after the last symbol are ignored.

        Args:
            payload: Packed code bits
            padding: Padding count from the container (0 and 8 mean none)
            root: Root of the Huffman tree
            original_size: Number of symbols to emit

        Returns:
            The decoded bytes

        Raises:
            UnexpectedEndOfStreamError: If the bits run out first
            MalformedTreeError: If a bit leads to a missing child
        """
        if not 0 <= padding <= NO_PADDING:
            raise InvalidFormatError(f"Invalid padding count {padding}")
        if padding == NO_PADDING:
            padding = 0

        result = bytearray()
        if original_size == 0:
            return bytes(result)

        reader = BitReader(payload, padding)
        node = root
        while len(result) < original_size:
            node = node.right if reader.read_bit() else node.left
            if node is None:
                raise MalformedTreeError("Code path leads outside the tree")
            if node.is_leaf():
                result.append(node.value)
                node = root

        return bytes(result)
