from __future__ import annotations

from typing import Iterable, Protocol, Union, runtime_checkable

from hopebridge.application.events import SessionEvent


@runtime_checkable
class EventLogPort(Protocol):
    """
    Minimal session event log port.

    Implementations may log to stdout or keep events in memory.
    """

    def append(self, event: Union[SessionEvent, dict]) -> None:
        """Append an event."""

    def stream(self, session_id: str) -> Iterable[dict]:
        """
        Stream events by session_id.

        May return an empty iterator depending on implementation.
        """

    def close(self) -> None:
        """Close underlying resources (optional)."""
