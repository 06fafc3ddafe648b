from .models import AppConfig, LLMConfig, LoggingConfig, NavigationConfig, VerificationConfig
from .logging_setup import setup_logging

__all__ = [
    "AppConfig",
    "LLMConfig",
    "LoggingConfig",
    "NavigationConfig",
    "VerificationConfig",
    "setup_logging",
]
