"""
In-memory session registry for the HTTP app.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from hopebridge.application.ports.event_log_port import EventLogPort
from hopebridge.bootstrap import build_controller, build_upload_flow
from hopebridge.config.models import AppConfig
from hopebridge.core.controller import SessionController
from hopebridge.core.upload_flow import DocumentVerifier, UploadFlow


@dataclass
class SessionEntry:
    controller: SessionController
    flow: UploadFlow

    @property
    def session_id(self) -> str:
        return self.controller.session_id


class SessionStore:
    """Holds one controller + upload flow per session id; nothing is persisted."""

    def __init__(self, config: AppConfig, verifier: DocumentVerifier, event_log: EventLogPort):
        self.config = config
        self.verifier = verifier
        self.event_log = event_log
        self._sessions: Dict[str, SessionEntry] = {}

    def create(self) -> SessionEntry:
        controller = build_controller(self.config, event_log=self.event_log)
        entry = SessionEntry(
            controller=controller,
            flow=build_upload_flow(controller, self.verifier, self.config),
        )
        self._sessions[entry.session_id] = entry
        return entry

    def get(self, session_id: str) -> Optional[SessionEntry]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None
