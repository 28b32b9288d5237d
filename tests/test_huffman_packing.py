import pytest

from huffman_coding import HuffmanTree
from huffman_errors import InvalidFormatError, UnexpectedEndOfStreamError
from huffman_packing import NO_PADDING, HuffmanPacker


def test_pack_aaaabbbcc():
    tree = HuffmanTree.build_from_data(b"aaaabbbcc")
    payload, padding = HuffmanPacker.pack(b"aaaabbbcc", tree.res_codes)
    # 0000 11 11 11 10 10 + 2 pad bits
    assert payload == bytes([0b00001111, 0b11101000])
    assert padding == 2


def test_pack_full_byte_uses_sentinel():
    payload, padding = HuffmanPacker.pack(b"abababab", {97: "0", 98: "1"})
    assert payload == bytes([0b01010101])
    assert padding == NO_PADDING


def test_unpack_stops_at_declared_count():
    tree = HuffmanTree.build_from_data(b"aaaabbbcc")
    payload, padding = HuffmanPacker.pack(b"aaaabbbcc", tree.res_codes)
    garbage = payload + b"\xff\xff"
    assert HuffmanPacker.unpack(garbage, 0, tree.root, 9) == b"aaaabbbcc"
    assert HuffmanPacker.unpack(payload, padding, tree.root, 5) == b"aaaab"


@pytest.mark.parametrize("padding", [0, NO_PADDING])
def test_no_padding_values(padding):
    codes = {97: "0", 98: "1"}
    tree = HuffmanTree.build_from_data(b"abababab")
    assert tree.res_codes == codes
    payload, _ = HuffmanPacker.pack(b"abababab", codes)
    assert HuffmanPacker.unpack(payload, padding, tree.root, 8) == b"abababab"


def test_unpack_runs_out_of_bits():
    tree = HuffmanTree.build_from_data(b"aaaabbbcc")
    payload, padding = HuffmanPacker.pack(b"aaaabbbcc", tree.res_codes)
    with pytest.raises(UnexpectedEndOfStreamError):
        HuffmanPacker.unpack(payload, padding, tree.root, 10)
    with pytest.raises(UnexpectedEndOfStreamError):
        HuffmanPacker.unpack(payload[:1], padding, tree.root, 9)


def test_padding_bits_are_not_decoded():
    # 'a' = '0', so the two padding zeros would decode as two more 'a'
    tree = HuffmanTree.build_from_data(b"aaaabbbcc")
    payload, padding = HuffmanPacker.pack(b"aaaabbbcc", tree.res_codes)
    with pytest.raises(UnexpectedEndOfStreamError):
        HuffmanPacker.unpack(payload, padding, tree.root, 11)


def test_invalid_padding():
    tree = HuffmanTree.build_from_data(b"ab")
    with pytest.raises(InvalidFormatError):
        HuffmanPacker.unpack(b"\x40", 9, tree.root, 2)
