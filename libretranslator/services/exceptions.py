# libretranslator/services/exceptions.py
"""
Exception types raised by the translation endpoint and clipboard collaborators.

Both translation failures are recovered at the request lifecycle boundary;
they differ only in the message shown to the user.
"""

from typing import Optional


class TranslationError(Exception):
    """Base class for failed translation requests."""

    pass


class ApplicationError(TranslationError):
    """The endpoint answered but reported a non-success code."""

    def __init__(self, code: Optional[int], message: str = ""):
        self.code = code
        super().__init__(message or f"Endpoint returned code {code}")


class TransportError(TranslationError):
    """The endpoint could not be reached or its response could not be parsed."""

    pass


class ClipboardError(Exception):
    """Writing to the clipboard failed."""

    pass
