"""
Word reading with nested include support.
"""

from .errors import IncludeError, ParseError
from .lexer import LexerError, LineLexer, split_line
from .loader import LoadError, WordLoader
from .reader import WordReader, WordResult
from .sources import ArgumentWordSource, FileWordSource, LineWordSource, WordSource
from .syntax import DEFAULT_SYNTAX, WordSyntax

__all__ = [
    "ArgumentWordSource",
    "DEFAULT_SYNTAX",
    "FileWordSource",
    "IncludeError",
    "LexerError",
    "LineLexer",
    "LineWordSource",
    "LoadError",
    "ParseError",
    "WordLoader",
    "WordReader",
    "WordResult",
    "WordSource",
    "WordSyntax",
    "split_line",
]
