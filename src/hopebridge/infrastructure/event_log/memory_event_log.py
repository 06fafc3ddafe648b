from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional, Union

from hopebridge.application.events import SessionEvent
from hopebridge.application.ports.event_log_port import EventLogPort


class InMemoryEventLog(EventLogPort):
    """
    In-memory event log (tests and the HTTP session store).

    Args:
        max_events: 保留的最大事件数；超出后丢弃最早的事件，None 表示不限
    """

    def __init__(self, max_events: Optional[int] = None) -> None:
        self.events: Deque[dict] = deque(maxlen=max_events)

    def append(self, event: Union[SessionEvent, dict]) -> None:
        if isinstance(event, SessionEvent):
            self.events.append(event.to_dict())
        else:
            self.events.append(dict(event))

    def stream(self, session_id: str) -> Iterable[dict]:
        return (e for e in list(self.events) if e.get("session_id") == session_id)

    def actions(self, session_id: str) -> List[str]:
        return [e.get("action", "") for e in self.stream(session_id)]

    def close(self) -> None:
        self.events.clear()
