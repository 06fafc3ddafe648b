"""
统一错误模块。
"""

from .errors import (
    ErrorSeverity,
    HopeBridgeError,
    ValidationError,
    NavigationError,
    SessionError,
    ProviderError,
    ResponseParseError,
    Result,
)

__all__ = [
    "ErrorSeverity",
    "HopeBridgeError",
    "ValidationError",
    "NavigationError",
    "SessionError",
    "ProviderError",
    "ResponseParseError",
    "Result",
]
