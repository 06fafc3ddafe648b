"""
LLM 客户端抽象层。
"""

from .providers.base import LLMProvider, ProviderInfo
from .factory import create_provider

__all__ = [
    "LLMProvider",
    "ProviderInfo",
    "create_provider",
]
