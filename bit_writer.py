from bitarray import bitarray


class BitWriter:
    """
    Simple bit writer on top of bitarray with byte alignment.
    Bits are stored MSB first, so the first code bit lands in the
    highest bit of the first byte.
    """

    def __init__(self):
        self.bits = bitarray(endian="big")

    def write_symbols(self, codes: dict[int, bitarray], data: bytes):
        """
        Appends the prefix code of every byte in data, in order.
        """
        self.bits.encode(codes, data)

    def byte_align(self) -> int:
        """
        Pads with zero bits up to the next byte boundary.
        Returns the number of bits added (0..7).
        """
        return self.bits.fill()

    def get_bytes(self) -> bytes:
        """
        Returns the written bits as bytes. Call byte_align() first.
        """
        return self.bits.tobytes()
