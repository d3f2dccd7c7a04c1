"""Count word frequencies of a file and write them to another file."""

from typing import Iterable, List, Tuple
import logging
import os
import time

from wordcounter.chunk_counter import ChunkCounter
from wordcounter.errors import InvalidArgument
from wordcounter.file_provider import FileProvider
from wordcounter.frequency_table import FrequencyTable, fold


OUTPUT_LINE_FORMAT = "{},{}"


def sort_frequencies(table: FrequencyTable) -> List[Tuple[str, int]]:
    """Most frequent words first, ties in alphabetical order."""
    return sorted(
        table.items(), key=lambda item: (-item[1], fold(item[0]), item[0]))


def format_frequencies(
        table: FrequencyTable, line_terminator: str = os.linesep) -> str:
    return line_terminator.join(
        OUTPUT_LINE_FORMAT.format(word, count)
        for word, count in sort_frequencies(table))


class WordFrequencyProcessor:
    def __init__(
            self,
            file_provider: FileProvider = None,
            chunk_counter: ChunkCounter = None,
            chunk_size: int = 4096,
            chunk_multiplier: int = 10) -> None:
        self.file_provider = file_provider or FileProvider()
        self.chunk_counter = chunk_counter or ChunkCounter()
        self.chunk_size = chunk_size
        self.chunk_multiplier = chunk_multiplier

    def count_stream(self, chunks: Iterable[str]) -> FrequencyTable:
        table = None
        carry = ""
        chunk_count = 0
        for chunk in chunks:
            table, carry = self.chunk_counter.count_chunk(chunk, table, carry)
            chunk_count += 1
            logging.debug(
                "Chunk %d done, %d distinct words so far.",
                chunk_count, len(table))

        table = self.chunk_counter.flush(table, carry)
        logging.info(
            "Counted %d chunks, %d distinct words.", chunk_count, len(table))
        return table

    def process_file(
            self, input_path: str, output_path: str) -> FrequencyTable:
        if not input_path:
            raise InvalidArgument("Input file path must not be empty.")
        if not output_path:
            raise InvalidArgument("Output file path must not be empty.")

        start = time.perf_counter()
        logging.info("Count words in '%s'.", input_path)
        chunks = self.file_provider.read_chunks(
            input_path, chunk_size=self.chunk_size,
            chunk_multiplier=self.chunk_multiplier)
        table = self.count_stream(chunks)

        self.file_provider.write_file(output_path, format_frequencies(table))
        logging.info("Done in %.3f s.", time.perf_counter() - start)
        return table
