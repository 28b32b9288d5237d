import struct
import time
from dataclasses import dataclass
from typing import BinaryIO

from compression_stats import CompressionStats
from compressor_ABC import Compressor
from huffman_coding import HuffmanTree, char_frequency
from huffman_errors import (
    InvalidFormatError,
    MalformedTreeError,
    UnexpectedEndOfStreamError,
)
from huffman_packing import NO_PADDING, HuffmanPacker
from tree_codec import TreeCodec

# HUF1 container constants
MAGIC = b"HUF1"
TREE_TERMINATOR = b"#"
SIZE_FORMAT = "<Q"  # original size, unsigned 64-bit little-endian
SIZE_BYTES = struct.calcsize(SIZE_FORMAT)
PROGRESS_BAR_WIDTH = 30


@dataclass
class HuffmanContainer:
    """
    Result of compress(): the container bytes plus reporting fields.
    """

    data: bytes
    original_size: int
    unique_chars: int

    @property
    def compressed_size(self) -> int:
        return len(self.data)

    def stats(self, processing_time: float = 0.0) -> CompressionStats:
        return CompressionStats(
            original_size=self.original_size,
            compressed_size=self.compressed_size,
            unique_chars=self.unique_chars,
            processing_time=processing_time,
        )

    @property
    def compression_ratio(self) -> float:
        return self.stats().compression_ratio

    @property
    def space_savings(self) -> float:
        return self.stats().space_savings


def compress(data: bytes) -> HuffmanContainer:
    """
    Compresses data into a HUF1 container.

    Layout: MAGIC, pre-order tree, '#', original size (<Q),
    padding count, packed payload. Empty input has no tree and
    no payload.
    """
    freqs = char_frequency(data)
    out = bytearray(MAGIC)

    if not freqs:
        out.extend(TREE_TERMINATOR)
        out.extend(struct.pack(SIZE_FORMAT, 0))
        out.append(NO_PADDING)
        return HuffmanContainer(bytes(out), 0, 0)

    tree = HuffmanTree.build_from_freq(freqs)
    payload, padding = HuffmanPacker.pack(data, tree.res_codes)

    out.extend(TreeCodec.serialize(tree.root))
    out.extend(TREE_TERMINATOR)
    out.extend(struct.pack(SIZE_FORMAT, len(data)))
    out.append(padding)
    out.extend(payload)
    return HuffmanContainer(bytes(out), len(data), len(freqs))


def decompress(container: bytes) -> bytes:
    """
    Restores the original bytes from a HUF1 container.

    Raises:
        InvalidFormatError: Wrong magic tag or padding count
        MalformedTreeError: Corrupt tree description
        UnexpectedEndOfStreamError: Truncated header or payload
    """
    if container[: len(MAGIC)] != MAGIC:
        raise InvalidFormatError("Invalid magic number, not a HUF1 container")
    pos = len(MAGIC)
    if pos >= len(container):
        raise UnexpectedEndOfStreamError("Container ends after the magic tag")

    root = None
    if container[pos : pos + 1] != TREE_TERMINATOR:
        root, pos = TreeCodec.deserialize(container, pos)
        if container[pos : pos + 1] != TREE_TERMINATOR:
            raise MalformedTreeError("Missing terminator after the tree")
    pos += 1

    if len(container) < pos + SIZE_BYTES + 1:
        raise UnexpectedEndOfStreamError("Container header is truncated")
    (original_size,) = struct.unpack_from(SIZE_FORMAT, container, pos)
    pos += SIZE_BYTES
    padding = container[pos]
    pos += 1

    if root is None:
        if original_size:
            raise MalformedTreeError(
                f"Container declares {original_size} bytes but has no tree"
            )
        return b""

    return HuffmanPacker.unpack(container[pos:], padding, root, original_size)


class HUFCompressor(Compressor):
    """
    Stream front end for the HUF1 container with optional
    progress display.
    """

    def __init__(self, show_progress: bool = False, verbose: bool = False):
        self.show_progress = show_progress
        self.verbose = verbose
        self.log = []

    def update_progress(self, operation: str, percent: int):
        if not self.show_progress:
            return
        filled = PROGRESS_BAR_WIDTH * percent // 100
        bar = "█" * filled + " " * (PROGRESS_BAR_WIDTH - filled)
        end = "\n" if percent >= 100 else ""
        print(f"\r{operation}: [{bar}] {percent}%", end=end, flush=True)

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> CompressionStats:
        """
        Compresses everything in input_stream into output_stream.
        Returns statistics of the run.
        """
        self.log.clear()
        start = time.perf_counter()

        self.update_progress("Reading file", 10)
        data = input_stream.read()

        self.update_progress("Encoding data", 50)
        container = compress(data)

        self.update_progress("Writing container", 85)
        output_stream.write(container.data)
        self.update_progress("Compression complete", 100)

        stats = container.stats(time.perf_counter() - start)
        self.log.extend(stats.summary().splitlines())
        if self.verbose:
            print(stats.summary())
        return stats

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> int:
        """
        Restores the data of the container in input_stream.
        Returns the number of bytes written.
        """
        self.log.clear()
        start = time.perf_counter()

        self.update_progress("Reading compressed file", 10)
        container = input_stream.read()

        self.update_progress("Decoding data", 60)
        data = decompress(container)

        self.update_progress("Writing output", 85)
        output_stream.write(data)
        self.update_progress("Decompression complete", 100)

        elapsed = time.perf_counter() - start
        self.log.append(f"Restored {len(data)} bytes in {elapsed:.3f} seconds")
        if self.verbose:
            print(self.log[-1])
        return len(data)
