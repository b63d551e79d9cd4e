"""
Errors raised while reading configuration words.
"""


class ParseError(Exception):
    """
    Malformed configuration input.

    The message and location are both optional. A bare ``ParseError()`` is
    valid and is what higher layers wrap when they add their own context.
    Failures that happen while cleaning up after this error (closing the
    sources of an aborted reader, for instance) are kept in ``suppressed``
    instead of replacing it.
    """

    def __init__(self, message: str | None = None, *, location: str | None = None):
        self.message = message
        self.location = location
        self.suppressed: list[BaseException] = []
        if message is None:
            super().__init__()
        elif location:
            super().__init__(f"{location}: {message}")
        else:
            super().__init__(message)

    @property
    def cause(self) -> BaseException | None:
        """The error this one was raised from, if any."""
        return self.__cause__


class IncludeError(ParseError):
    """An include reference that can't be resolved to a readable source."""
