# src/hopebridge/infrastructure/llm/providers/openai_provider.py
"""
OpenAI / OpenRouter Provider

支持所有 OpenAI API 兼容且支持图片输入的服务。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from openai import OpenAI

from .base import LLMProvider, ProviderInfo, data_url

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """
    OpenAI 兼容的多模态 Provider

    支持:
    - OpenAI (gpt-4o, gpt-4o-mini)
    - OpenRouter (多模型路由)
    """

    DEFAULT_MODEL = "gpt-4o-mini"
    ALLOWED_PARAMS = {"temperature", "top_p", "max_tokens", "timeout"}

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        max_tokens: int = 1024,
    ):
        """
        初始化 OpenAI Provider

        Args:
            api_key: API 密钥
            model_name: 模型名称
            base_url: 自定义 API 地址
            timeout: 请求超时 (秒)
            max_tokens: 最大输出 tokens
        """
        if not api_key:
            raise ValueError("API key 不能为空")

        self.api_key = api_key
        self.model_name = model_name
        self.base_url = base_url
        self.timeout = timeout
        self.max_tokens = max_tokens

        # 单次请求，不让 SDK 自动重试
        client_kwargs: Dict[str, Any] = {
            "api_key": api_key,
            "max_retries": 0,
        }
        if base_url:
            client_kwargs["base_url"] = base_url

        self.client = OpenAI(**client_kwargs)
        logger.info(f"OpenAIProvider 初始化: {self}")

    def _provider_name(self) -> str:
        if self.base_url and "openrouter" in self.base_url.lower():
            return "openrouter"
        return "openai"

    def invoke_with_image(
        self,
        prompt: str,
        image_b64: str,
        mime_type: str,
        json_output: bool = True,
        **kwargs,
    ) -> str:
        """非流式多模态调用"""
        extra_params = {
            k: v for k, v in kwargs.items()
            if k in self.ALLOWED_PARAMS and v is not None
        }
        timeout = extra_params.pop("timeout", self.timeout)
        extra_params.setdefault("max_tokens", self.max_tokens)
        if json_output:
            extra_params["response_format"] = {"type": "json_object"}

        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "image_url", "image_url": {"url": data_url(image_b64, mime_type)}},
                    {"type": "text", "text": prompt},
                ],
            }
        ]

        response = self.client.chat.completions.create(
            model=self.model_name,
            messages=messages,
            timeout=timeout,
            **extra_params,
        )

        if response.choices and response.choices[0].message:
            content = response.choices[0].message.content
            return content.strip() if content else ""
        return ""

    @property
    def info(self) -> ProviderInfo:
        return ProviderInfo(
            provider_name=self._provider_name(),
            model_name=self.model_name,
            api_base=self.base_url or "https://api.openai.com",
            max_tokens=self.max_tokens,
            supports_json_mode=True,
        )
