# src/hopebridge/infrastructure/llm/providers/anthropic_provider.py
"""
Anthropic Claude Provider (Native SDK)

使用原生 Anthropic SDK，图片以 base64 source 块传入。
Claude 没有 JSON 输出模式，json_output 只通过指令约束。
"""

from __future__ import annotations

import logging

import anthropic

from .base import LLMProvider, ProviderInfo

logger = logging.getLogger(__name__)


class AnthropicProvider(LLMProvider):
    """Anthropic Claude Native Provider"""

    DEFAULT_MODEL = "claude-3-5-sonnet-20241022"

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL,
        max_tokens: int = 1024,
        timeout: float = 60.0,
    ):
        """
        初始化 Anthropic Provider

        Args:
            api_key: Anthropic API 密钥
            model_name: 模型名称
            max_tokens: 最大输出 tokens
            timeout: 请求超时 (秒)
        """
        if not api_key:
            raise ValueError("API key 不能为空")

        self.api_key = api_key
        self.model_name = model_name
        self.max_tokens = max_tokens
        self.timeout = timeout

        self.client = anthropic.Anthropic(api_key=api_key, max_retries=0, timeout=timeout)
        logger.info(f"AnthropicProvider 初始化: {self}")

    def invoke_with_image(
        self,
        prompt: str,
        image_b64: str,
        mime_type: str,
        json_output: bool = True,
        **kwargs,
    ) -> str:
        """非流式多模态调用"""
        max_tokens = kwargs.get("max_tokens", self.max_tokens)
        temperature = kwargs.get("temperature", 0.0)

        response = self.client.messages.create(
            model=self.model_name,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {"type": "base64", "media_type": mime_type, "data": image_b64},
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )

        if response.content and len(response.content) > 0:
            return response.content[0].text.strip()
        return ""

    @property
    def info(self) -> ProviderInfo:
        return ProviderInfo(
            provider_name="anthropic",
            model_name=self.model_name,
            api_base="https://api.anthropic.com",
            max_tokens=self.max_tokens,
            supports_json_mode=False,
        )
