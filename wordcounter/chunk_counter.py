"""Count words in a text that arrives in arbitrary chunks.

A chunk can end in the middle of a word, so the last word of every chunk
is held back as a carry and prepended to the next chunk. Once the stream
ends, the caller flushes the final carry.
"""

from typing import Tuple

from wordcounter.aggregators import Aggregator, SequentialAggregator
from wordcounter.delimiters import DelimiterSet, DEFAULT_DELIMITERS
from wordcounter.frequency_table import FrequencyTable
from wordcounter.tokenize import tokenize


class ChunkCounter:
    def __init__(
            self,
            aggregator: Aggregator = None,
            delimiters: DelimiterSet = DEFAULT_DELIMITERS) -> None:
        if aggregator is None:
            aggregator = SequentialAggregator()
        self.aggregator = aggregator
        self.delimiters = delimiters

    def _prepare_table(self, table: FrequencyTable) -> FrequencyTable:
        if table is None:
            table = self.aggregator.new_table()
        self.aggregator.check_table(table)
        return table

    def count_words(
            self, content: str,
            table: FrequencyTable = None) -> FrequencyTable:
        """Count all words in content, the last one included."""
        table = self._prepare_table(table)
        if not content:
            return table
        return self.aggregator.merge(
            table, tokenize(content, self.delimiters))

    def count_chunk(
            self, chunk: str,
            table: FrequencyTable = None,
            carry: str = "") -> Tuple[FrequencyTable, str]:
        """Count the complete words of carry + chunk.

        Returns the table and the new carry, which is the last word of the
        combined text. When the chunk ends with a delimiter, the delimiter
        stays glued to the carry so that the next chunk cannot extend the
        word.
        """
        table = self._prepare_table(table)
        if not chunk:
            return table, carry or ""

        words = tokenize((carry or "") + chunk, self.delimiters)
        if not words:
            return table, ""

        last_word = words[-1]
        if chunk[-1] in self.delimiters:
            last_word += chunk[-1]

        self.aggregator.merge(table, words[:-1])
        return table, last_word

    def flush(
            self, table: FrequencyTable = None,
            carry: str = "") -> FrequencyTable:
        return self.count_words(carry, table)
