"""Strategies for merging a list of words into a frequency table."""

from typing import List, Sequence
import logging
import multiprocessing
from multiprocessing.pool import ThreadPool

import numpy as np

from wordcounter.errors import ConfigurationError
from wordcounter.frequency_table import ConcurrentFrequencyTable, FrequencyTable


CONCURRENT_TABLE_REQUIRED = (
    "Concurrent frequency table is required to count words in parallel.")


class Aggregator:
    """Creates tables of the right kind and merges words into them."""

    name = None

    def new_table(self) -> FrequencyTable:
        raise NotImplementedError()

    def check_table(self, table: FrequencyTable) -> None:
        pass

    def merge(
            self, table: FrequencyTable,
            words: Sequence[str]) -> FrequencyTable:
        raise NotImplementedError()

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class SequentialAggregator(Aggregator):
    name = "sequential"

    def new_table(self) -> FrequencyTable:
        return FrequencyTable()

    def merge(
            self, table: FrequencyTable,
            words: Sequence[str]) -> FrequencyTable:
        for word in words:
            table.increment(word)
        return table


def _increment_all(table: FrequencyTable, words: List[str]) -> int:
    for word in words:
        table.increment(word)
    return len(words)


class ConcurrentAggregator(Aggregator):
    """Splits the words between worker threads.

    Only a ConcurrentFrequencyTable may be used, any other table is
    rejected before a single word is counted.
    """

    name = "concurrent"

    def __init__(self, num_workers: int = None) -> None:
        if num_workers is None:
            num_workers = multiprocessing.cpu_count()
        if num_workers < 1:
            raise ConfigurationError(
                f"Number of workers must be positive, got {num_workers}.")
        self.num_workers = num_workers
        self._pool = None

    @property
    def pool(self) -> ThreadPool:
        if self._pool is None:
            logging.debug(
                "Start thread pool with %d workers.", self.num_workers)
            self._pool = ThreadPool(processes=self.num_workers)
        return self._pool

    def new_table(self) -> ConcurrentFrequencyTable:
        return ConcurrentFrequencyTable()

    def check_table(self, table: FrequencyTable) -> None:
        if not isinstance(table, ConcurrentFrequencyTable):
            raise ConfigurationError(CONCURRENT_TABLE_REQUIRED)

    def merge(
            self, table: FrequencyTable,
            words: Sequence[str]) -> FrequencyTable:
        self.check_table(table)
        if len(words) == 0:
            return table

        num_parts = min(self.num_workers, len(words))
        if num_parts == 1:
            _increment_all(table, words)
            return table

        parts = [
            part.tolist() for part in np.array_split(
                np.asarray(words, dtype=object), num_parts)]
        counted = sum(self.pool.starmap(
            _increment_all, [(table, part) for part in parts]))
        assert counted == len(words)
        return table

    def close(self) -> None:
        if self._pool is not None:
            self._pool.close()
            self._pool.join()
            self._pool = None


AGGREGATORS = {
    SequentialAggregator.name: SequentialAggregator,
    ConcurrentAggregator.name: ConcurrentAggregator,
}


def get_aggregator(name: str, num_workers: int = None) -> Aggregator:
    if name not in AGGREGATORS:
        raise ConfigurationError(
            f"Unknown aggregation '{name}', "
            f"expected one of: {', '.join(sorted(AGGREGATORS))}.")
    if name == ConcurrentAggregator.name:
        return ConcurrentAggregator(num_workers)
    return AGGREGATORS[name]()
