# src/hopebridge/infrastructure/llm/providers/base.py
"""
LLM Provider 抽象基类

定义统一的多模态调用接口（图片 + 指令 -> 文本），支持多后端实现。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ProviderInfo:
    """Provider 元信息"""
    provider_name: str
    model_name: str
    api_base: Optional[str] = None
    max_tokens: int = 1024
    supports_json_mode: bool = True


class LLMProvider(ABC):
    """
    LLM 提供商抽象基类

    设计原则:
    - 图片以 base64 字符串传入，不含 data URL 前缀
    - 只做单次请求，不重试
    - 异常直接向上抛出，由调用方决定如何降级
    """

    @abstractmethod
    def invoke_with_image(
        self,
        prompt: str,
        image_b64: str,
        mime_type: str,
        json_output: bool = True,
        **kwargs,
    ) -> str:
        """
        携带一张图片调用 LLM

        Args:
            prompt: 指令文本
            image_b64: base64 编码的图片数据
            mime_type: 图片 MIME 类型 (image/jpeg, image/png ...)
            json_output: 是否要求模型只输出 JSON
            **kwargs: 额外参数 (temperature, max_tokens, timeout 等)

        Returns:
            LLM 响应文本（可能为空串）
        """
        ...

    @property
    @abstractmethod
    def info(self) -> ProviderInfo:
        """获取 Provider 元信息"""
        ...

    def __repr__(self) -> str:
        info = self.info
        return f"{self.__class__.__name__}(model={info.model_name}, provider={info.provider_name})"


def data_url(image_b64: str, mime_type: str) -> str:
    """拼接 data URL（OpenAI 图片消息格式）"""
    return f"data:{mime_type};base64,{image_b64}"
