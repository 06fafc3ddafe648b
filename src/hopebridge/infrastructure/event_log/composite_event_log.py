from __future__ import annotations

import logging
from typing import Iterable, List, Union

from hopebridge.application.events import SessionEvent
from hopebridge.application.ports.event_log_port import EventLogPort

logger = logging.getLogger(__name__)


class CompositeEventLog(EventLogPort):
    """
    Tee events to multiple backends.

    Used by the HTTP app to keep JSON-line logging while retaining events in memory.
    """

    def __init__(self, backends: List[EventLogPort]):
        self._backends = [b for b in backends if b is not None]

    def append(self, event: Union[SessionEvent, dict]) -> None:
        for backend in self._backends:
            try:
                backend.append(event)
            except Exception as e:
                logger.debug(f"CompositeEventLog backend append failed: {e}")

    def stream(self, session_id: str) -> Iterable[dict]:
        # Prefer the first backend that yields anything for this session.
        for backend in self._backends:
            events = list(backend.stream(session_id))
            if events:
                return iter(events)
        return iter(())

    def close(self) -> None:
        for backend in self._backends:
            try:
                backend.close()
            except Exception as e:
                logger.debug(f"CompositeEventLog backend close failed: {e}")
