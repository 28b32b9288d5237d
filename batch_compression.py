"""
Batch mode: compress several files into one output directory.
Each file is an independent run; a failure is recorded and the
remaining files are still processed.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from compression_stats import CompressionStats
from HUF_compressor import HUFCompressor

OUTPUT_EXTENSION = ".huf"


@dataclass
class BatchResult:
    results: List[Tuple[str, str, CompressionStats]] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def total_original(self) -> int:
        return sum(stats.original_size for _, _, stats in self.results)

    @property
    def total_compressed(self) -> int:
        return sum(stats.compressed_size for _, _, stats in self.results)

    @property
    def total_time(self) -> float:
        return sum(stats.processing_time for _, _, stats in self.results)

    @property
    def overall_ratio(self) -> float:
        if not self.total_original:
            return 0.0
        return self.total_compressed / self.total_original

    @property
    def overall_savings(self) -> float:
        if not self.total_original:
            return 0.0
        return (1.0 - self.overall_ratio) * 100


def output_path_for(input_file: str, output_dir: str, taken=()) -> str:
    """
    <output_dir>/<stem>.huf, or <stem>_1.huf, <stem>_2.huf ... when the
    name is already in taken.
    """
    stem = Path(input_file).stem
    candidate = os.path.join(output_dir, stem + OUTPUT_EXTENSION)
    suffix = 1
    while candidate in taken:
        candidate = os.path.join(output_dir, f"{stem}_{suffix}{OUTPUT_EXTENSION}")
        suffix += 1
    return candidate


def batch_compress(
    files: Iterable[str],
    output_dir: str,
    compressor: Optional[HUFCompressor] = None,
) -> BatchResult:
    """
    Compress every file in files to <output_dir>/<stem>.huf.
    Files sharing a stem get numbered names so no container is overwritten.

    Args:
        files: Paths of the files to compress
        output_dir: Directory for the containers, created if missing
        compressor: Compressor to use, a quiet HUFCompressor by default

    Returns:
        BatchResult with per-file statistics and failures
    """
    if compressor is None:
        compressor = HUFCompressor()
    os.makedirs(output_dir, exist_ok=True)

    batch = BatchResult()
    used = set()
    for input_file in files:
        output_file = output_path_for(input_file, output_dir, used)
        used.add(output_file)
        try:
            stats = compressor.compress_file(input_file, output_file)
        except (OSError, ValueError, EOFError) as e:
            batch.failures[input_file] = str(e)
            continue
        batch.results.append((input_file, output_file, stats))
    return batch
