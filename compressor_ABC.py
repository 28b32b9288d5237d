from abc import ABC, abstractmethod
import io
import os
from typing import BinaryIO, Tuple

from compression_stats import CompressionStats


class Compressor(ABC):
    """
    Interface describing compression and decompression of byte streams.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> CompressionStats:
        """
        Reads all bytes from the input stream, compresses them and writes
        the container to the output stream.

        Args:
            input_stream: Stream with the original data
            output_stream: Stream to write the compressed data to

        Returns:
            Statistics of the run
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> int:
        """
        Reads a container from the input stream and writes the restored
        bytes to the output stream.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream to write the restored data to

        Returns:
            Number of bytes restored
        """
        pass

    def compress_file(self, input_file: str, output_file: str) -> CompressionStats:
        """
        Compresses a file. The output file is removed if anything fails.

        Args:
            input_file: Path to the file to compress
            output_file: Path to the container to create

        Returns:
            Statistics of the run
        """
        with open(input_file, "rb") as in_file:
            buffer = io.BytesIO(in_file.read())
        out_buffer = io.BytesIO()
        stats = self.compress(buffer, out_buffer)
        _write_output(output_file, out_buffer.getvalue())
        return stats

    def decompress_file(self, input_file: str, output_file: str) -> int:
        """
        Decompresses a file. The output file is removed if anything fails.

        Args:
            input_file: Path to the container
            output_file: Path to the restored file

        Returns:
            Number of bytes restored
        """
        with open(input_file, "rb") as in_file:
            buffer = io.BytesIO(in_file.read())
        out_buffer = io.BytesIO()
        restored = self.decompress(buffer, out_buffer)
        _write_output(output_file, out_buffer.getvalue())
        return restored

    def compress_bytes(self, data: bytes) -> Tuple[bytes, CompressionStats]:
        """
        Helper for compressing an in-memory buffer.

        Returns:
            Tuple (compressed data, statistics)
        """
        out_buffer = io.BytesIO()
        stats = self.compress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), stats

    def decompress_bytes(self, data: bytes) -> bytes:
        """
        Helper for decompressing an in-memory buffer.
        """
        out_buffer = io.BytesIO()
        self.decompress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue()


def _write_output(output_file: str, data: bytes):
    # a half-written container must never be left on disk
    try:
        with open(output_file, "wb") as out_file:
            out_file.write(data)
    except BaseException:
        if os.path.exists(output_file):
            os.remove(output_file)
        raise
