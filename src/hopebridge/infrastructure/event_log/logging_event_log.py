from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Union

from hopebridge.application.events import SessionEvent
from hopebridge.application.ports.event_log_port import EventLogPort

# 滚动事件过于频繁，只在 DEBUG 下输出
QUIET_ACTIONS: Dict[str, int] = {"scroll": logging.DEBUG}


class LoggingEventLog(EventLogPort):
    """
    Emit session events as JSON lines to the Python logger.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.INFO,
        quiet_actions: Optional[Dict[str, int]] = None,
    ):
        self._logger = logger or logging.getLogger("hopebridge.eventlog")
        self._level = level
        self._quiet_actions = QUIET_ACTIONS if quiet_actions is None else quiet_actions

    def _level_for(self, action: str) -> int:
        return self._quiet_actions.get(action, self._level)

    def append(self, event: Union[SessionEvent, dict]) -> None:
        if isinstance(event, dict):
            try:
                event = SessionEvent(**event)
            except TypeError:
                self._logger.log(self._level, str(event))
                return
        level = self._level_for(event.action)
        if self._logger.isEnabledFor(level):
            self._logger.log(level, event.to_json())

    def stream(self, session_id: str) -> Iterable[dict]:
        # Logging backend cannot stream retrospectively.
        return iter(())

    def close(self) -> None:
        return None
