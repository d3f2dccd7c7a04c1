from typing import Iterable


class DelimiterSet:
    """Immutable set of characters that separate words."""

    __slots__ = ("_characters",)

    def __init__(self, characters: Iterable[str]) -> None:
        chars = frozenset(characters)
        for char in chars:
            if len(char) != 1:
                raise ValueError(
                    f"Delimiters must be single characters, got '{char}'.")
        object.__setattr__(self, "_characters", chars)

    def __setattr__(self, name, value):
        raise AttributeError("DelimiterSet is immutable.")

    @property
    def characters(self) -> frozenset:
        return self._characters

    def is_delimiter(self, char: str) -> bool:
        return char in self._characters

    def __contains__(self, char: str) -> bool:
        return char in self._characters

    def __len__(self) -> int:
        return len(self._characters)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DelimiterSet):
            return NotImplemented
        return self._characters == other._characters

    def __hash__(self) -> int:
        return hash(self._characters)

    def __repr__(self) -> str:
        return f"DelimiterSet({''.join(sorted(self._characters))!r})"


DEFAULT_DELIMITERS = DelimiterSet(" \r\n\t.,;:!?()[]{}\"'-_/\\@#%&*")


def is_delimiter(char: str, delimiters: DelimiterSet = DEFAULT_DELIMITERS) -> bool:
    return delimiters.is_delimiter(char)
