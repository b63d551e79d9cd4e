"""
Word sources: the inputs a word reader pulls raw lines from.

Every source implements the same small contract (``next_line``,
``line_location_description``, ``base_dir``, ``base_url``, ``close``), so the
reader can stack argument lists, files, URLs and open streams without caring
which is which.
"""

import io
import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO
from urllib.parse import urljoin, urlparse
from urllib.request import url2pathname

import httpx

from .. import const
from ..logging import get_logger
from .errors import ParseError


logger = get_logger("sources")


def is_url(location: str | os.PathLike) -> bool:
    """
    Check if a location is a URL rather than a filesystem path.

    Single-letter schemes are Windows drive letters, not URLs.
    """
    if not isinstance(location, str):
        return False
    return len(urlparse(location).scheme) > 1


def resolve_reference(
    reference: str,
    base_dir: Path | None = None,
    base_url: str | None = None,
) -> str | Path:
    """
    Resolve an include reference against a source's context.

    Returns a URL string or a Path, ready for ``FileWordSource``.
    """
    if is_url(reference):
        return reference

    if base_url is not None:
        return urljoin(base_url, reference)

    if reference == const.STD_STREAM:
        return reference

    path = Path(reference)
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def source_identity(location: str | os.PathLike) -> str | None:
    """Identity of a location, used to detect recursive includes."""
    if location == const.STD_STREAM:
        return None
    if is_url(location):
        return str(location)
    return str(Path(location).resolve())


class WordSource(ABC):
    """
    Base class for word sources.

    ``position`` counts the lines returned so far, so a location description
    names the 1-based line that was consumed last ("line 0" before the first
    one).
    """

    # Whether the reader still has to split lines into words
    splits_lines = True

    def __init__(self, base_dir: Path | None = None, base_url: str | None = None):
        if base_dir is not None and base_url is not None:
            raise ValueError("A word source has either a base directory or a base URL, not both")
        self._base_dir = Path(base_dir) if base_dir is not None else None
        self._base_url = base_url
        self.position = 0
        self.exhausted = False
        self.identity: str | None = None

    @property
    def base_dir(self) -> Path | None:
        """Directory that relative includes are resolved against."""
        return self._base_dir

    @property
    def base_url(self) -> str | None:
        """URL that relative includes are resolved against."""
        return self._base_url

    def set_base_dir(self, base_dir: Path) -> None:
        """Switch include resolution over to a directory."""
        self._base_dir = Path(base_dir)
        self._base_url = None

    def next_line(self) -> str | None:
        """Return the next raw line, or None once the source is exhausted."""
        if self.exhausted:
            return None

        try:
            line = self._read_line()
        except UnicodeDecodeError as e:
            self.close()
            raise ParseError(
                f"Can't decode {e.encoding} text ({e.reason})",
                location=self.line_location_description(),
            ) from e
        except Exception:
            self.close()
            raise

        if line is None:
            self.exhausted = True
            self.close()
            return None

        self.position += 1
        return line

    @abstractmethod
    def _read_line(self) -> str | None:
        """Read the next line from the underlying input."""

    @abstractmethod
    def line_location_description(self) -> str:
        """Describe the current position for diagnostics."""

    def close(self) -> None:
        """Release the underlying resource. Safe to call more than once."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.line_location_description()!r})"


class ArgumentWordSource(WordSource):
    """
    Words from a pre-split argument vector.

    Each argument is returned verbatim as one line, and is one word.
    """

    splits_lines = False

    def __init__(self, arguments: Sequence[str], base_dir: Path | None = None):
        super().__init__(base_dir=base_dir)
        self.arguments = list(arguments)

    def _read_line(self) -> str | None:
        if self.position >= len(self.arguments):
            return None
        return self.arguments[self.position]

    def line_location_description(self) -> str:
        return f"argument number {self.position}"


class LineWordSource(WordSource):
    """
    Lines from an open text stream.

    The stream is read with ``readline()``; the line terminator is removed
    and nothing else is touched.
    """

    def __init__(
        self,
        stream: TextIO,
        description: str,
        base_dir: Path | None = None,
        base_url: str | None = None,
    ):
        super().__init__(base_dir=base_dir, base_url=base_url)
        self.stream = stream
        self.description = description
        self._owns_stream = False
        self._closed = False

    def _read_line(self) -> str | None:
        line = self.stream.readline()
        if not line:
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith(("\n", "\r")):
            return line[:-1]
        return line

    def line_location_description(self) -> str:
        return f"line {self.position} of {self.description}"

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            logger.debug(f"Closing {self.description}")
            self.stream.close()


class FileWordSource(LineWordSource):
    """
    Lines from a file, a URL or the standard input.

    A filesystem path resolves includes against its parent directory, a URL
    against itself. The sentinel path ``-`` reads the standard input and
    resolves neither. The stream is opened right away and owned by this
    source.
    """

    def __init__(
        self,
        location: str | os.PathLike,
        *,
        client: httpx.Client | None = None,
        encoding: str = const.DEFAULT_ENCODING,
    ):
        if location == const.STD_STREAM:
            super().__init__(sys.stdin, "standard input")
            return

        if is_url(location):
            url = str(location)
            stream = _open_url(url, client, encoding)
            super().__init__(stream, f"URL '{url}'", base_url=url)
        else:
            path = Path(location)
            stream = open(path, encoding=encoding)
            super().__init__(stream, f"file '{path}'", base_dir=path.parent)

        self.identity = source_identity(location)
        self._owns_stream = True
        logger.debug(f"Opened {self.description}")


def _open_url(url: str, client: httpx.Client | None, encoding: str) -> TextIO:
    """Open a URL as a text stream; local file URLs bypass HTTP."""
    parsed = urlparse(url)

    if parsed.scheme == "file":
        return open(url2pathname(parsed.path), encoding=encoding)

    try:
        if client is not None:
            response = client.get(url)
        else:
            response = httpx.get(url, follow_redirects=True, timeout=const.DEFAULT_URL_TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise OSError(f"Can't read URL '{url}': {e}") from e

    return io.StringIO(response.text)
