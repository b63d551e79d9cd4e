"""
Word reader for nested configuration files.

Reads a configuration language word by word from argument lists, files,
URLs or open streams, with include directives that splice other sources
into the stream.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
