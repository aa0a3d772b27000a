"""Errors raised by the generator pipeline.

Every stage wraps the library error it hits in one of these, so __main__
only has to catch GeneratorError to log and exit non-zero.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""


class DecodeError(GeneratorError):
    """The discovery document is unreadable, not JSON, or the wrong shape."""


class DuplicateHandlerError(DecodeError):
    """Two API methods map to the same handler name."""

    def __init__(self, handler_name: str, first: str, second: str) -> None:
        super().__init__(
            f"handler name {handler_name!r} produced by both {first} and {second}"
        )
        self.handler_name = handler_name


class TemplateError(GeneratorError):
    """The template could not be rendered."""


class FormatError(GeneratorError):
    """The rendered text is not valid Python source."""


class WriteError(GeneratorError):
    """The generated file could not be written."""
