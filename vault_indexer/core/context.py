"""Mutable engine state shared by the walker, dispatcher, and lifecycle."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class EngineContext:
    """Holds the ``enabled`` and ``rebuilding`` flags for one vault.

    ``enabled`` gates incremental event handling. ``rebuilding`` is set for the
    duration of a full rebuild so that notifications caused by the rebuild's
    own writes are not mistaken for user edits.
    """

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._rebuilding = False

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def is_rebuilding(self) -> bool:
        return self._rebuilding

    @contextmanager
    def rebuild_guard(self) -> Iterator[None]:
        """Mark a rebuild as in progress until the block exits, however it exits.

        Nested use keeps the flag set until the outermost block finishes.
        """
        previous = self._rebuilding
        self._rebuilding = True
        try:
            yield
        finally:
            self._rebuilding = previous

    def as_payload(self) -> dict[str, bool]:
        return {"enabled": self._enabled, "rebuilding": self._rebuilding}
