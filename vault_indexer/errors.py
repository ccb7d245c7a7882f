"""Exception types raised by the index synchronization engine.

Every error the engine raises derives from :class:`IndexingError`, so callers
at the per-folder and per-event boundaries can catch the whole family at once.
"""


class IndexingError(Exception):
    """Base class for index synchronization failures."""


class DocumentNotFound(IndexingError):
    """An expected index document (or its folder) does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Index document '{path}' not found")
        self.path = path


class ReadWriteFailure(IndexingError):
    """The underlying vault storage failed to read or write a document."""

    def __init__(self, path: str, operation: str, reason: object) -> None:
        super().__init__(f"Failed to {operation} '{path}': {reason}")
        self.path = path
        self.operation = operation


class StructuralAmbiguity(IndexingError):
    """A rename whose source or destination folder cannot be resolved."""
