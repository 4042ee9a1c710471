"""Exception types raised by the tagger.

Each error also derives from the built-in exception category callers would
expect for it, so code that already handles ``ValueError`` or ``OSError``
around file loading keeps working.
"""
from __future__ import annotations

__all__ = ["SmolError", "ModelDeserializeError", "ModelSerializeError", "EmptyModelError"]


class SmolError(Exception):
    """Base class for every error raised by smol."""


class ModelDeserializeError(SmolError, ValueError):
    """A persisted model is corrupt, truncated or written in an unknown format."""


class ModelSerializeError(SmolError, OSError):
    """A model could not be written to its destination."""


class EmptyModelError(SmolError, RuntimeError):
    """Inference was attempted with a model that knows no classes."""

    def __init__(self, message: str = "Can't tag with an empty model; train or load one first.") -> None:
        super().__init__(message)
