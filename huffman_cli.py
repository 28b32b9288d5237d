"""
Command line front end for the HUF1 compressor.

    huffman-compressor compress input.txt input.huf
    huffman-compressor decompress input.huf restored.txt
    huffman-compressor analyze input.txt --top 5 --plot freq.png
    huffman-compressor batch out_dir a.txt b.txt
"""

import argparse
import sys

from batch_compression import batch_compress
from compression_stats import format_file_size
from file_analysis import analyze_file, plot_frequencies
from huffman_coding import analyze
from huffman_errors import HuffmanError
from HUF_compressor import HUFCompressor


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffman-compressor",
        description="Lossless file compression with Huffman coding (HUF1 format)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="do not display the progress bar",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("compress", help="compress INPUT into the container OUTPUT")
    p.add_argument("input")
    p.add_argument("output")

    p = sub.add_parser("decompress", help="restore the container INPUT into OUTPUT")
    p.add_argument("input")
    p.add_argument("output")

    p = sub.add_parser("analyze", help="print size, entropy and top symbols of INPUT")
    p.add_argument("input")
    p.add_argument("--top", type=non_negative_int, default=10, help="number of symbols to list")
    p.add_argument("--plot", default=None, help="save a frequency chart to this PNG")

    p = sub.add_parser("batch", help="compress several files into OUTPUT_DIR")
    p.add_argument("output_dir")
    p.add_argument("files", nargs="+")

    return parser


def run_batch(args, compressor: HUFCompressor) -> int:
    result = batch_compress(args.files, args.output_dir, compressor)
    for input_file, output_file, stats in result.results:
        print(f"{input_file} -> {output_file} ({stats.space_savings:.1f}% saved)")
    for input_file, reason in result.failures.items():
        print(f"{input_file}: FAILED ({reason})", file=sys.stderr)

    print("Batch compression summary")
    print(f"  Total original size: {format_file_size(result.total_original)}")
    print(f"  Total compressed size: {format_file_size(result.total_compressed)}")
    print(f"  Overall compression ratio: {result.overall_ratio:.2f}:1")
    print(f"  Overall space savings: {result.overall_savings:.1f}%")
    print(f"  Total processing time: {result.total_time:.2f} seconds")
    return 1 if result.failures else 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    compressor = HUFCompressor(show_progress=not args.no_progress)

    try:
        if args.command == "compress":
            stats = compressor.compress_file(args.input, args.output)
            print(stats.summary())
        elif args.command == "decompress":
            restored = compressor.decompress_file(args.input, args.output)
            print(f"Restored {restored} bytes to {args.output}")
        elif args.command == "analyze":
            report = analyze_file(args.input, args.top)
            print(report.report())
            if args.plot:
                with open(args.input, "rb") as f:
                    plot_frequencies(analyze(f.read()), args.plot)
                print(f"Frequency chart saved to {args.plot}")
        else:
            return run_batch(args, compressor)
    except (HuffmanError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
