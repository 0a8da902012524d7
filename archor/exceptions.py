"""Exceptions raised by archor.

Conformance failures are never raised: they are reported through
ValidationReport. The exceptions below signal inputs or models that cannot
be checked at all.
"""


class ArchorError(Exception):
    """Base exception for archor errors."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)


class FeedDecodeError(ArchorError):
    """Raw feed data could not be decoded into a Document."""


class StructuralDefectError(ArchorError):
    """A model holds a value its schema position cannot represent.

    This points at a bug in whatever built the model, not at a malformed feed.
    """

    def __init__(self, message: str, path: str):
        super().__init__(f"{path}: {message}", path=path)
