#!/usr/bin/env python3

"""Count word frequencies in a text file.

Writes one 'word,count' line per distinct word, most frequent first.
"""

import argparse
import logging
import multiprocessing
import sys

from wordcounter.aggregators import AGGREGATORS, get_aggregator
from wordcounter.chunk_counter import ChunkCounter
from wordcounter.file_provider import FileProvider
from wordcounter.processor import WordFrequencyProcessor


def check_paths(input_path: str, output_path: str) -> str:
    """Return a message describing what is wrong with the paths, if anything."""
    if not all(path.endswith(".txt") for path in (input_path, output_path)):
        return "Only .txt files are supported."
    if input_path == output_path:
        return "Input file and output file can not be the same."
    return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(__doc__)
    parser.add_argument("input", help="Input text file (.txt).")
    parser.add_argument("output", help="Output file (.txt).")
    parser.add_argument(
        "--chunk-size", type=int, default=4096,
        help="Number of characters read at once.")
    parser.add_argument(
        "--chunk-multiplier", type=int, default=10,
        help="Number of reads joined into one chunk.")
    parser.add_argument(
        "--aggregation", default="concurrent", choices=sorted(AGGREGATORS),
        help="How words of a chunk are merged into the table.")
    parser.add_argument(
        "--num-threads", type=int, default=multiprocessing.cpu_count(),
        help="Worker threads for concurrent aggregation.")
    parser.add_argument(
        "--verbose", action="store_true", default=False,
        help="Log progress of every chunk.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format='%(asctime)s %(message)s',
        level=logging.DEBUG if args.verbose else logging.INFO)

    problem = check_paths(args.input, args.output)
    if problem is not None:
        print(problem, file=sys.stderr)
        return 2

    try:
        with get_aggregator(args.aggregation, args.num_threads) as aggregator:
            processor = WordFrequencyProcessor(
                FileProvider(), ChunkCounter(aggregator),
                chunk_size=args.chunk_size,
                chunk_multiplier=args.chunk_multiplier)
            processor.process_file(args.input, args.output)
    except Exception as exc:
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
