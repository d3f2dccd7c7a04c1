"""Split text into words on a fixed set of delimiter characters."""

from typing import List

from wordcounter.delimiters import DelimiterSet, DEFAULT_DELIMITERS


def tokenize(
        text: str,
        delimiters: DelimiterSet = DEFAULT_DELIMITERS) -> List[str]:
    if not text:
        return []

    tokens = []
    token_start = None
    for i, char in enumerate(text):
        if char in delimiters:
            if token_start is not None:
                tokens.append(text[token_start:i])
                token_start = None
        elif token_start is None:
            token_start = i
    if token_start is not None:
        tokens.append(text[token_start:])
    return tokens
