"""Errors raised by the word counter."""


class WordCounterError(Exception):
    pass


class InvalidArgument(WordCounterError, ValueError):
    """A required argument is missing or out of range."""


class SourceNotFound(WordCounterError, FileNotFoundError):
    """The input file does not exist."""


class SourceUnavailable(WordCounterError, FileNotFoundError):
    """The directory containing the input file does not exist."""


class DestinationUnavailable(WordCounterError, FileNotFoundError):
    """The directory for the output file does not exist."""


class ConfigurationError(WordCounterError, TypeError):
    """Counting components were combined in an unsupported way."""
