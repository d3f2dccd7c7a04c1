"""Case-insensitive word to count mappings.

Words are grouped by their case-folded form. The table remembers the
casing of the first occurrence of every word and reports counts under it.
"""

from typing import Dict, Iterable, Iterator, Mapping, Tuple
import threading


def fold(word: str) -> str:
    return word.casefold()


class FrequencyTable:
    """Table for a single writer."""

    concurrent = False

    def __init__(self, counts: Mapping[str, int] = None) -> None:
        self._counts = {}
        self._forms = {}
        if counts is not None:
            for word, count in counts.items():
                self.add(word, count)

    def increment(self, word: str) -> None:
        self.add(word, 1)

    def add(self, word: str, count: int) -> None:
        key = fold(word)
        if key in self._counts:
            self._counts[key] += count
        else:
            self._forms[key] = word
            self._counts[key] = count

    def __getitem__(self, word: str) -> int:
        return self._counts[fold(word)]

    def get(self, word: str, default: int = None) -> int:
        return self._counts.get(fold(word), default)

    def __contains__(self, word: str) -> bool:
        return fold(word) in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return (self._forms[key] for key in list(self._counts))

    def items(self) -> Iterable[Tuple[str, int]]:
        return [(self._forms[key], count)
                for key, count in list(self._counts.items())]

    def to_dict(self) -> Dict[str, int]:
        return dict(self.items())

    def __eq__(self, other) -> bool:
        if isinstance(other, FrequencyTable):
            return self._counts == other._counts
        if isinstance(other, Mapping):
            folded = {}
            for word, count in other.items():
                key = fold(word)
                folded[key] = folded.get(key, 0) + count
            return self._counts == folded
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class ConcurrentFrequencyTable(FrequencyTable):
    """Table whose updates are atomic per word.

    Every word hashes to one of a fixed number of locks, so concurrent
    writers only wait for each other when their words share a stripe.
    """

    concurrent = True

    def __init__(
            self, counts: Mapping[str, int] = None,
            lock_stripes: int = 64) -> None:
        if lock_stripes < 1:
            raise ValueError("At least one lock stripe is needed.")
        self._locks = [threading.Lock() for _ in range(lock_stripes)]
        super().__init__(counts)

    def add(self, word: str, count: int) -> None:
        key = fold(word)
        with self._locks[hash(key) % len(self._locks)]:
            if key in self._counts:
                self._counts[key] += count
            else:
                self._forms[key] = word
                self._counts[key] = count
