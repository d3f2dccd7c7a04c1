"""Reading and writing text files for the word counter."""

from typing import Iterator
import logging
import os

from wordcounter.errors import (
    DestinationUnavailable, InvalidArgument, SourceNotFound,
    SourceUnavailable)


def _containing_directory(path: str) -> str:
    return os.path.dirname(os.path.abspath(path))


class FileProvider:
    def __init__(
            self,
            encoding: str = "utf-8-sig",
            output_encoding: str = "utf-8",
            errors: str = "replace") -> None:
        self.encoding = encoding
        self.output_encoding = output_encoding
        self.errors = errors

    def _open_source(self, path: str):
        if not path:
            raise InvalidArgument("Input file path must not be empty.")
        try:
            return open(
                path, "r", encoding=self.encoding, errors=self.errors)
        except FileNotFoundError as exc:
            if not os.path.isdir(_containing_directory(path)):
                raise SourceUnavailable(
                    f"Could not find a part of the path '{path}'.") from exc
            raise SourceNotFound(f"Could not find file '{path}'.") from exc

    def read_file(self, path: str) -> str:
        with self._open_source(path) as f_in:
            return f_in.read()

    def read_chunks(
            self, path: str,
            chunk_size: int = 4096,
            chunk_multiplier: int = 1) -> Iterator[str]:
        """Lazily read the file, chunk_size * chunk_multiplier characters at a time.

        The last chunk holds whatever is left and can be empty.
        """
        if chunk_size < 1:
            raise InvalidArgument(
                f"Chunk size must be positive, got {chunk_size}.")
        if chunk_multiplier < 1:
            raise InvalidArgument(
                f"Chunk multiplier must be positive, got {chunk_multiplier}.")

        with self._open_source(path) as f_in:
            buffers = []
            while True:
                buffer = f_in.read(chunk_size)
                if not buffer:
                    break
                buffers.append(buffer)
                if len(buffers) == chunk_multiplier:
                    yield "".join(buffers)
                    buffers = []
            yield "".join(buffers)

    def read_lines(self, path: str) -> Iterator[str]:
        with self._open_source(path) as f_in:
            for line in f_in:
                yield line.rstrip("\r\n")

    def write_file(self, path: str, content: str) -> None:
        if not path:
            raise InvalidArgument("Output file path must not be empty.")
        if not os.path.isdir(_containing_directory(path)):
            raise DestinationUnavailable(
                f"Could not find a part of the path '{path}'.")
        logging.info("Write %d characters to '%s'.", len(content), path)
        with open(
                path, "w", encoding=self.output_encoding, newline="") as f_out:
            f_out.write(content)
