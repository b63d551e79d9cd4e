"""
Word reader with nested includes.

Pulls lines from a stack of word sources, splits them into words and splices
included files into the stream at the point of the include directive:

    -injars in.jar
    @common.pro        <- words of common.pro come here
    -outjars out.jar
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from ..logging import get_logger
from .errors import IncludeError, ParseError
from .lexer import LexerError, LineLexer
from .sources import FileWordSource, WordSource, resolve_reference, source_identity
from .syntax import DEFAULT_SYNTAX, WordSyntax


logger = get_logger("reader")


@dataclass
class _Frame:
    """A source on the include stack, with the words of its current line."""

    source: WordSource
    words: list[str] = field(default_factory=list)
    cursor: int = 0

    @property
    def has_words(self) -> bool:
        return self.cursor < len(self.words)

    def take(self) -> str:
        word = self.words[self.cursor]
        self.cursor += 1
        return word


@dataclass(frozen=True)
class WordResult:
    """Outcome of ``WordReader.try_next_word``: a word or an error, never both."""

    word: str | None = None
    error: ParseError | OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def at_end(self) -> bool:
        return self.ok and self.word is None


class WordReader:
    """
    Reads words from a stack of word sources.

    The bottom of the stack is the source the reader was created with; every
    include directive pushes a new source on top. Exhausted sources are popped
    and closed. Once the bottom source is done, ``next_word`` returns None on
    every call.

    Any error leaving ``next_word`` closes all open sources and ends the
    reader.

    Usage:
        with WordReader(FileWordSource("app.pro")) as reader:
            for word in reader:
                ...
    """

    def __init__(
        self,
        source: WordSource,
        syntax: WordSyntax | None = None,
        client: httpx.Client | None = None,
    ):
        self.syntax = syntax or DEFAULT_SYNTAX
        self.client = client
        self.current_word: str | None = None

        self._frames: list[_Frame] = [_Frame(source)]
        self._last_source = source
        self._comments: list[str] = []

    @property
    def sources(self) -> tuple[WordSource, ...]:
        """Active sources, outermost first."""
        return tuple(frame.source for frame in self._frames)

    @property
    def current_source(self) -> WordSource:
        """Innermost active source, or the last one read once exhausted."""
        if self._frames:
            return self._frames[-1].source
        return self._last_source

    @property
    def exhausted(self) -> bool:
        return not self._frames

    def next_word(self) -> str | None:
        """Return the next word, or None at the end of the input."""
        try:
            word = self._next_word()
        except Exception as e:
            self._abort(e)
            raise

        self.current_word = word
        return word

    def try_next_word(self) -> WordResult:
        """Like ``next_word``, but returns failures instead of raising them."""
        try:
            return WordResult(word=self.next_word())
        except (ParseError, OSError) as e:
            return WordResult(error=e)

    def line_location_description(self) -> str:
        """Location in the innermost source."""
        return self.current_source.line_location_description()

    def location_description(self) -> str:
        """
        Location of the current word, followed by the chain of includes
        that led to it.
        """
        sources = list(self.sources) or [self._last_source]

        if self.current_word is None:
            description = "end of "
        else:
            description = f"'{self.current_word}' in "
        description += sources[-1].line_location_description()

        for source in reversed(sources[:-1]):
            description += f",\n  included from {source.line_location_description()}"

        return description

    def last_comments(self) -> str | None:
        """Return the comments read since the previous call, and forget them."""
        if not self._comments:
            return None
        comments = "\n".join(self._comments)
        self._comments.clear()
        return comments

    def set_base_dir(self, base_dir: Path) -> None:
        """Resolve further includes of the current source against a directory."""
        self.current_source.set_base_dir(base_dir)

    def close(self) -> None:
        """Close all active sources."""
        errors = self._close_all()
        if errors:
            raise errors[0]

    def __enter__(self) -> "WordReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __iter__(self) -> Iterator[str]:
        while (word := self.next_word()) is not None:
            yield word

    def _next_word(self) -> str | None:
        while True:
            word = self._next_plain_word()
            if word is None:
                return None
            if self.syntax.is_include(word):
                self._include(self._reference_word(word))
            elif (reference := self.syntax.attached_reference(word)) is not None:
                self._include(reference)
            else:
                return word

    def _next_plain_word(self) -> str | None:
        """Next word from the top of the stack, popping exhausted sources."""
        while self._frames:
            frame = self._frames[-1]
            if frame.has_words:
                return frame.take()
            if not self._fill(frame):
                self._pop()
        return None

    def _fill(self, frame: _Frame) -> bool:
        """Read the next line of a frame into its words. False at its end."""
        line = frame.source.next_line()
        if line is None:
            return False

        frame.cursor = 0
        if not frame.source.splits_lines:
            frame.words = [line]
            return True

        lexer = LineLexer(line, self.syntax)
        try:
            frame.words = lexer.words()
        except LexerError as e:
            raise ParseError(
                f"{e.message} at column {e.column}",
                location=frame.source.line_location_description(),
            ) from e

        # Only whole comment lines count, not remarks after words
        if lexer.comment is not None and not frame.words:
            self._comments.append(lexer.comment)
        return True

    def _reference_word(self, directive: str) -> str:
        """The word following an include directive, from the same source."""
        frame = self._frames[-1]
        while not frame.has_words:
            if not self._fill(frame):
                raise ParseError(
                    f"Expecting configuration file name after '{directive}'",
                    location=f"end of {frame.source.line_location_description()}",
                )
        return frame.take()

    def _include(self, reference: str) -> None:
        source = self.current_source
        self.current_word = reference

        try:
            location = resolve_reference(reference, source.base_dir, source.base_url)
            identity = source_identity(location)
        except ValueError as e:
            raise IncludeError(
                f"Invalid configuration reference '{reference}' ({e})",
                location=self.location_description(),
            ) from e

        if identity is not None and identity in (s.identity for s in self.sources):
            raise IncludeError(
                f"Recursive include of '{reference}'",
                location=self.location_description(),
            )

        try:
            included = FileWordSource(location, client=self.client)
        except (OSError, ValueError, httpx.InvalidURL) as e:
            raise IncludeError(
                f"Can't read included configuration '{reference}' ({e})",
                location=self.location_description(),
            ) from e

        logger.debug(f"Including {included.description} from {source.line_location_description()}")
        self._frames.append(_Frame(included))

    def _pop(self) -> None:
        frame = self._frames.pop()
        frame.source.close()
        self._last_source = frame.source
        logger.debug(f"Finished reading {frame.source!r}")

    def _close_all(self) -> list[Exception]:
        errors: list[Exception] = []
        if self._frames:
            self._last_source = self._frames[-1].source

        while self._frames:
            frame = self._frames.pop()
            try:
                frame.source.close()
            except Exception as e:
                errors.append(e)

        return errors

    def _abort(self, error: Exception) -> None:
        """Release every source after a failure, without masking it."""
        for close_error in self._close_all():
            if isinstance(error, ParseError):
                error.suppressed.append(close_error)
            else:
                logger.warning(f"Failed to close source after {error!r}: {close_error}")
