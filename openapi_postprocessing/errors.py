"""Errors raised around document post-processing.

The traversal engine itself raises nothing of its own; visitor exceptions
propagate untouched. These errors cover configuration, visitor registration
and document files, and each carries the exit code the CLI reports for it.
"""

from __future__ import annotations


class PostProcessingError(Exception):
    """Base error; anything unclassified exits with 1."""

    exit_code: int = 1


class ValidationError(PostProcessingError):
    """Bad settings, unknown visitor names or invalid CLI flags."""

    exit_code = 2


class DocumentDecodeError(ValidationError):
    """A document file is not JSON/YAML, or its top level is not an object."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Cannot decode {source}: {reason}")
        self.source = source
        self.reason = reason


class IOFailure(PostProcessingError):
    """A document or settings file could not be read or written."""

    exit_code = 3


def exit_code_for_exception(exc: BaseException) -> int:
    """Map an exception raised by a command to its CLI exit code.

    ``OSError`` escaping a command is reported like ``IOFailure``; visitor
    faults and other unexpected exceptions fall back to the base code.
    """
    if isinstance(exc, PostProcessingError):
        return exc.exit_code
    if isinstance(exc, OSError):
        return IOFailure.exit_code
    return PostProcessingError.exit_code
