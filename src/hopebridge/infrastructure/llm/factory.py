# src/hopebridge/infrastructure/llm/factory.py
"""
根据配置创建 Provider

没有凭证时返回 None，由校验网关走模拟路径。
"""

from __future__ import annotations

import logging
from typing import Optional

from hopebridge.config.models import LLMConfig

from .providers.base import LLMProvider

logger = logging.getLogger(__name__)


def create_provider(config: LLMConfig) -> Optional[LLMProvider]:
    """根据配置创建 Provider"""
    api_key = config.resolve_api_key()
    if not api_key:
        logger.info("未配置 API key，不创建 Provider")
        return None

    if config.provider == "openai":
        from .providers.openai_provider import OpenAIProvider
        return OpenAIProvider(
            api_key=api_key,
            model_name=config.model or OpenAIProvider.DEFAULT_MODEL,
            base_url=config.base_url,
            timeout=config.timeout,
            max_tokens=config.max_tokens,
        )

    elif config.provider == "anthropic":
        from .providers.anthropic_provider import AnthropicProvider
        return AnthropicProvider(
            api_key=api_key,
            model_name=config.model or AnthropicProvider.DEFAULT_MODEL,
            max_tokens=config.max_tokens,
            timeout=config.timeout,
        )

    else:
        raise ValueError(f"未知的 provider 类型: {config.provider}")
