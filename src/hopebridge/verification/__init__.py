"""
文档校验网关
"""

from .encoding import encode_document, guess_mime_type
from .gateway import VerificationGateway
from .prompts import (
    FALLBACK_OUTCOME,
    FALLBACK_REASON,
    SIMULATED_OUTCOME,
    SIMULATION_REASON,
    VERIFICATION_PROMPT,
)

__all__ = [
    "encode_document",
    "guess_mime_type",
    "VerificationGateway",
    "VERIFICATION_PROMPT",
    "SIMULATION_REASON",
    "FALLBACK_REASON",
    "SIMULATED_OUTCOME",
    "FALLBACK_OUTCOME",
]
