"""
Lexical settings of the configuration language.
"""

from dataclasses import dataclass

from .. import const


@dataclass(frozen=True)
class WordSyntax:
    """
    Characters and words with a special meaning to the word reader.

    Defaults:
        quote_chars         ' and "
        escape_char         backslash (None disables escaping)
        comment_char        #
        include_directives  @ and -include
        include_prefix      @, so "@common.pro" includes common.pro (None disables)
        delimiters          none; each listed character is a word of its own
    """

    quote_chars: str = const.QUOTE_CHARS
    escape_char: str | None = const.ESCAPE_CHAR
    comment_char: str = const.COMMENT_CHAR
    include_directives: tuple[str, ...] = const.INCLUDE_DIRECTIVES
    include_prefix: str | None = const.AT_DIRECTIVE
    delimiters: str = ""

    def __post_init__(self) -> None:
        special = [*self.quote_chars, self.comment_char, *self.delimiters]
        if self.escape_char is not None:
            special.append(self.escape_char)
        if len(special) != len(set(special)):
            raise ValueError(f"Overlapping special characters in {self!r}")
        if any(char.isspace() for char in special):
            raise ValueError("Whitespace can't be a special character")

    def is_include(self, word: str) -> bool:
        """Check if a word is an include directive."""
        return word in self.include_directives

    def attached_reference(self, word: str) -> str | None:
        """Reference glued to the include prefix, as in "@common.pro"."""
        if self.include_prefix and word.startswith(self.include_prefix) and word != self.include_prefix:
            return word[len(self.include_prefix):]
        return None


DEFAULT_SYNTAX = WordSyntax()
