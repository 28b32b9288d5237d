"""
File analysis: size, distinct bytes, entropy and the most
frequent symbols of a file.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from compression_stats import format_file_size
from huffman_coding import analyze

SPECIAL_NAMES = {ord(" "): "SPACE", ord("\n"): "NEWLINE", ord("\t"): "TAB"}


def char_display(symbol: int) -> str:
    """Printable name of a byte."""
    if symbol in SPECIAL_NAMES:
        return SPECIAL_NAMES[symbol]
    if 32 < symbol < 127:
        return chr(symbol)
    return f"0x{symbol:02X}"


def calculate_entropy(freq: dict[int, int]) -> float:
    """
    Shannon entropy in bits per symbol.

    :param freq: frequency table {symbol: count}
    :return: float, 0.0 for an empty table
    """
    counts = np.fromiter(freq.values(), dtype=np.float64, count=len(freq))
    total = counts.sum()
    if total == 0:
        return 0.0
    probabilities = counts / total
    return float(-(probabilities * np.log2(probabilities)).sum())


@dataclass
class FileAnalysis:
    file_size: int
    unique_chars: int
    entropy: float
    top_chars: List[Tuple[int, int, float]] = field(default_factory=list)

    def report(self) -> str:
        lines = [
            f"File size: {format_file_size(self.file_size)} ({self.file_size} bytes)",
            f"Unique characters: {self.unique_chars}",
            f"Entropy: {self.entropy:.4f} bits",
        ]
        if self.top_chars:
            lines.append(f"Top {len(self.top_chars)} most frequent characters:")
            for i, (symbol, count, percent) in enumerate(self.top_chars, start=1):
                lines.append(
                    f"  {i}. '{char_display(symbol)}' : {count} ({percent:.2f}%)"
                )
        return "\n".join(lines)


def analyze_bytes(data: bytes, top_n: int = 10) -> FileAnalysis:
    """
    Analyze a buffer. Top symbols are ordered by count, then by byte value.
    """
    if top_n < 0:
        raise ValueError(f"top_n must not be negative, got {top_n}")
    freq = analyze(data)
    total = len(data)
    ranked = sorted(freq.items(), key=lambda item: (-item[1], item[0]))[:top_n]
    top_chars = [(sym, count, 100.0 * count / total) for sym, count in ranked]
    return FileAnalysis(
        file_size=total,
        unique_chars=len(freq),
        entropy=calculate_entropy(freq),
        top_chars=top_chars,
    )


def analyze_file(path: str, top_n: int = 10) -> FileAnalysis:
    with open(path, "rb") as f:
        return analyze_bytes(f.read(), top_n)


def plot_frequencies(freq: dict[int, int], output_path: str):
    """
    Saves a bar chart of byte frequencies (0..255) to output_path.
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    counts = np.zeros(256, dtype=np.int64)
    for sym, count in freq.items():
        counts[sym] = count

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.bar(np.arange(256), counts, width=1.0)
    ax.set_xlim(-0.5, 255.5)
    ax.set_xlabel("Byte value")
    ax.set_ylabel("Occurrences")
    ax.set_title("Byte frequency distribution")
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
