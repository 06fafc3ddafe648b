"""
组装入口：按配置创建控制器、校验网关与上传流程，避免在各处手动 new 依赖。
"""

from __future__ import annotations

from typing import Optional

from hopebridge.application.ports.event_log_port import EventLogPort
from hopebridge.config.models import AppConfig
from hopebridge.core.controller import SessionController
from hopebridge.core.navigation import policy_for
from hopebridge.core.upload_flow import DocumentVerifier, UploadFlow
from hopebridge.verification.gateway import VerificationGateway


def build_gateway(config: AppConfig) -> VerificationGateway:
    return VerificationGateway.from_config(config)


def build_controller(
    config: AppConfig,
    *,
    event_log: Optional[EventLogPort] = None,
    session_id: Optional[str] = None,
) -> SessionController:
    return SessionController(
        session_id=session_id,
        policy=policy_for(config.navigation.strict),
        event_log=event_log,
    )


def build_upload_flow(
    controller: SessionController,
    verifier: DocumentVerifier,
    config: AppConfig,
) -> UploadFlow:
    return UploadFlow(
        controller,
        verifier,
        auto_return_delay=config.verification.auto_return_delay_ms / 1000,
    )
