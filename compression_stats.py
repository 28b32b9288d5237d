"""
Statistics collected for a single compression run.
"""

from dataclasses import dataclass

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_file_size(size_bytes: int) -> str:
    """
    Human readable size with 1024 steps, e.g. 1536 -> '1.50 KB'.
    """
    size = float(size_bytes)
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    if unit == 0:
        return f"{int(size)} {SIZE_UNITS[unit]}"
    return f"{size:.2f} {SIZE_UNITS[unit]}"


@dataclass
class CompressionStats:
    """Sizes, timing and derived ratios of one compression."""

    original_size: int
    compressed_size: int
    unique_chars: int
    processing_time: float = 0.0
    algorithm: str = "Huffman Coding"

    @property
    def compression_ratio(self) -> float:
        """Compressed size divided by original size (0.0 for empty input)."""
        if not self.original_size:
            return 0.0
        return self.compressed_size / self.original_size

    @property
    def space_savings(self) -> float:
        """Percentage of the original size saved (0.0 for empty input)."""
        if not self.original_size:
            return 0.0
        return (1.0 - self.compression_ratio) * 100

    @property
    def rating(self) -> str:
        savings = self.space_savings
        if savings > 50:
            return "EXCELLENT"
        if savings > 30:
            return "GOOD"
        if savings > 10:
            return "FAIR"
        return "POOR"

    def summary(self) -> str:
        """
        Returns the log lines describing this run.
        """
        lines = [
            f"Algorithm: {self.algorithm}",
            f"Original size: {format_file_size(self.original_size)}",
            f"Compressed size: {format_file_size(self.compressed_size)}",
            f"Compression ratio: {self.compression_ratio:.2f}:1",
            f"Space savings: {self.space_savings:.1f}%",
            f"Unique characters: {self.unique_chars}",
            f"Processing time: {self.processing_time:.3f} seconds",
            f"Performance rating: {self.rating}",
        ]
        return "\n".join(lines)
