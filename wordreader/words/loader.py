"""
Entry points that build word readers from common inputs.
"""

import io
import os
from collections.abc import Sequence
from pathlib import Path

import httpx

from ..logging import get_logger
from .errors import ParseError
from .reader import WordReader
from .sources import ArgumentWordSource, FileWordSource, LineWordSource
from .syntax import WordSyntax


logger = get_logger("loader")


class LoadError(Exception):
    """Exception raised when configuration words can't be loaded."""

    pass


class WordLoader:
    """
    Opens word readers over arguments, files, URLs or strings.

    Usage:
        loader = WordLoader()
        words = loader.load_file("/etc/app/app.pro")
        # or
        words = loader.load_args(sys.argv[1:], base_dir=Path.cwd())
    """

    def __init__(
        self,
        syntax: WordSyntax | None = None,
        client: httpx.Client | None = None,
    ):
        self.syntax = syntax
        self.client = client

    def open_args(self, arguments: Sequence[str], base_dir: str | Path | None = None) -> WordReader:
        """Reader over pre-split command-line arguments."""
        source = ArgumentWordSource(arguments, Path(base_dir) if base_dir is not None else None)
        return WordReader(source, self.syntax, self.client)

    def open_file(self, location: str | os.PathLike) -> WordReader:
        """
        Reader over a file, a URL or the standard input (``-``).

        Raises:
            OSError: If the location can't be opened
        """
        return WordReader(FileWordSource(location, client=self.client), self.syntax, self.client)

    def open_string(
        self,
        source: str,
        description: str = "<string>",
        base_dir: str | Path | None = None,
    ) -> WordReader:
        """Reader over configuration text held in memory."""
        stream = io.StringIO(source)
        line_source = LineWordSource(
            stream,
            description,
            base_dir=Path(base_dir) if base_dir is not None else None,
        )
        return WordReader(line_source, self.syntax, self.client)

    def load_args(self, arguments: Sequence[str], base_dir: str | Path | None = None) -> list[str]:
        """Read all words of an argument list, following includes."""
        return self._read_all(lambda: self.open_args(arguments, base_dir))

    def load_file(self, location: str | os.PathLike) -> list[str]:
        """
        Read all words of a file or URL, following includes.

        Raises:
            LoadError: If the input can't be read or is malformed
        """
        return self._read_all(lambda: self.open_file(location))

    def load_string(
        self,
        source: str,
        description: str = "<string>",
        base_dir: str | Path | None = None,
    ) -> list[str]:
        """Read all words of a string, following includes."""
        return self._read_all(lambda: self.open_string(source, description, base_dir))

    def _read_all(self, open_reader) -> list[str]:
        try:
            with open_reader() as reader:
                words = list(reader)
        except ParseError as e:
            raise LoadError(f"Failed to parse configuration: {e}") from e
        except OSError as e:
            raise LoadError(f"Failed to read configuration: {e}") from e

        logger.info(f"Read {len(words)} configuration words")
        return words
