"""
Application constants and metadata.
"""

# Application info
APP_NAME = "Word Reader"
APP_VERSION = "0.1.0"

# Lexical defaults
QUOTE_CHARS = "'\""
ESCAPE_CHAR = "\\"
COMMENT_CHAR = "#"

# Words that splice another source into the stream
AT_DIRECTIVE = "@"
INCLUDE_DIRECTIVE = "-include"
INCLUDE_DIRECTIVES = (AT_DIRECTIVE, INCLUDE_DIRECTIVE)

# Path that stands for the process's standard stream
STD_STREAM = "-"

# Encoding of local configuration files
DEFAULT_ENCODING = "utf-8"

# Seconds to wait for a remote configuration
DEFAULT_URL_TIMEOUT = 30.0
