# src/hopebridge/infrastructure/llm/providers/__init__.py
"""
LLM Provider 提供商抽象层

- 统一的多模态 LLMProvider 接口
- 后端: OpenAI 兼容服务, Anthropic
"""

from .base import LLMProvider, ProviderInfo, data_url

__all__ = [
    "LLMProvider",
    "ProviderInfo",
    "data_url",
]
