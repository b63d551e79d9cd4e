"""
Splits a single configuration line into words.

Supports:
- Words separated by runs of whitespace
- Quoted spans (single or double quotes) that keep whitespace inside a word
- An escape character that takes the next character literally
- Comments running from the comment character to the end of the line
- Optional delimiter characters that form words of their own
"""

from .syntax import DEFAULT_SYNTAX, WordSyntax


class LexerError(Exception):
    """Exception raised for malformed lines."""

    def __init__(self, message: str, column: int):
        self.message = message
        self.column = column
        super().__init__(f"Column {column}: {message}")


class LineLexer:
    """
    Tokenizer for one line of configuration text.

    Example:
        -keep "my class"  # keep it
    yields the words ``-keep`` and ``my class`` and the comment ``keep it``.
    """

    def __init__(self, line: str, syntax: WordSyntax = DEFAULT_SYNTAX):
        self.line = line
        self.syntax = syntax
        self.pos = 0
        self.comment: str | None = None

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.line):
            return ""
        return self.line[self.pos]

    def _advance(self) -> str:
        """Advance position and return current character."""
        char = self._current()
        if char:
            self.pos += 1
        return char

    @property
    def column(self) -> int:
        return self.pos + 1

    def _skip_whitespace(self) -> None:
        while self._current() and self._current().isspace():
            self._advance()

    def _ends_word(self, char: str) -> bool:
        return (
            not char
            or char.isspace()
            or char == self.syntax.comment_char
            or char in self.syntax.delimiters
        )

    def _read_escaped(self, result: list[str]) -> None:
        """Append the character following an escape character."""
        column = self.column
        self._advance()  # skip escape
        char = self._advance()
        if not char:
            raise LexerError("Dangling escape character at end of line", column)
        result.append(char)

    def _read_quoted(self, result: list[str]) -> None:
        """Append the contents of a quoted span, without its quotes."""
        column = self.column
        quote_char = self._advance()

        while self._current() and self._current() != quote_char:
            if self._current() == self.syntax.escape_char:
                self._advance()
                if not self._current():
                    break
            result.append(self._advance())

        if not self._current():
            raise LexerError(f"Missing closing quote {quote_char}", column)

        self._advance()  # skip closing quote

    def _read_word(self) -> str:
        result: list[str] = []

        while not self._ends_word(self._current()):
            char = self._current()
            if char == self.syntax.escape_char:
                self._read_escaped(result)
            elif char in self.syntax.quote_chars:
                self._read_quoted(result)
            else:
                result.append(self._advance())

        return "".join(result)

    def words(self) -> list[str]:
        """Split the whole line, recording any trailing comment."""
        words: list[str] = []

        while True:
            self._skip_whitespace()
            char = self._current()

            if not char:
                break

            if char == self.syntax.comment_char:
                self.comment = self.line[self.pos + 1:].strip()
                break

            if char in self.syntax.delimiters:
                words.append(self._advance())
                continue

            words.append(self._read_word())

        return words


def split_line(line: str, syntax: WordSyntax = DEFAULT_SYNTAX) -> list[str]:
    """Convenience function to split a line into words."""
    return LineLexer(line, syntax).words()
