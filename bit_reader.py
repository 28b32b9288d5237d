from bitarray import bitarray

from huffman_errors import UnexpectedEndOfStreamError


class BitReader:
    """
    Reads single bits from a packed payload, MSB first.
    Trailing padding bits are excluded from the readable length.
    """

    def __init__(self, data: bytes, padding: int = 0) -> None:
        """
        Initialize BitReader over data.

        Args:
            data: Packed payload bytes
            padding: Number of zero bits appended to the last byte (0..7)
        """
        self.bits = bitarray(endian="big")
        self.bits.frombytes(data)
        self.limit = max(len(self.bits) - padding, 0)
        self.pos = 0

    def read_bit(self) -> int:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1)

        Raises:
            UnexpectedEndOfStreamError: If the bit stream is exhausted
        """
        if self.pos >= self.limit:
            raise UnexpectedEndOfStreamError(
                f"Bit stream exhausted after {self.pos} bits"
            )
        val = self.bits[self.pos]
        self.pos += 1
        return val
