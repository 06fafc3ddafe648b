"""
HopeBridge API - FastAPI backend for the mobile client
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hopebridge import __version__
from hopebridge.api.routes import sessions, students
from hopebridge.api.session_store import SessionStore
from hopebridge.bootstrap import build_gateway
from hopebridge.config.models import AppConfig
from hopebridge.core.errors import HopeBridgeError, NavigationError, SessionError, ValidationError
from hopebridge.core.upload_flow import DocumentVerifier
from hopebridge.infrastructure.event_log import CompositeEventLog, InMemoryEventLog, LoggingEventLog

logger = logging.getLogger(__name__)

MAX_RETAINED_EVENTS = 10_000


def _status_for(exc: HopeBridgeError) -> int:
    if exc.code == "STUDENT_NOT_FOUND":
        return 404
    if isinstance(exc, ValidationError):
        return 422
    if isinstance(exc, (NavigationError, SessionError)):
        return 409
    return 500


def create_app(config: Optional[AppConfig] = None, verifier: Optional[DocumentVerifier] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        config: app config (defaults to environment)
        verifier: document verifier override, defaults to the configured gateway
    """
    config = config or AppConfig.from_env()

    app = FastAPI(
        title="HopeBridge API",
        description="Student/donor matching prototype with AI document verification",
        version=__version__,
    )

    # CORS for the mobile/web client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    event_log = CompositeEventLog([LoggingEventLog(), InMemoryEventLog(max_events=MAX_RETAINED_EVENTS)])
    app.state.config = config
    app.state.event_log = event_log
    app.state.sessions = SessionStore(config, verifier or build_gateway(config), event_log)

    @app.exception_handler(HopeBridgeError)
    async def _handle_domain_error(request: Request, exc: HopeBridgeError):
        status = _status_for(exc)
        if status >= 500:
            logger.error(f"Unhandled domain error: {exc}")
        return JSONResponse(
            status_code=status,
            content={"detail": exc.message, "code": exc.code, "context": exc.context or {}},
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "version": __version__}

    app.include_router(students.router, prefix="/api", tags=["Students"])
    app.include_router(sessions.router, prefix="/api", tags=["Sessions"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
