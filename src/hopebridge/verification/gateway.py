# hopebridge/verification/gateway.py
"""
文档校验网关

把上传的成绩单图片交给多模态模型判断是否可信。

行为约定:
- 未配置凭证: 固定延迟后返回模拟通过结论（永远不会判为无效）
- 已配置凭证: 单次请求，要求模型只输出 {"isValid": bool, "reason": str}
- 任何失败（网络、空响应、JSON 不合法）都返回乐观的兜底结论，不重试、不向上抛
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from hopebridge.config.models import AppConfig
from hopebridge.core.errors import HopeBridgeError, ProviderError, ResponseParseError, Result
from hopebridge.domain import VerificationOutcome
from hopebridge.infrastructure.llm import LLMProvider, create_provider

from .encoding import encode_document
from .json_parser import parse_json
from .prompts import FALLBACK_OUTCOME, SIMULATED_OUTCOME, VERIFICATION_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_SIMULATION_DELAY = 2.0


class VerificationGateway:
    """多模态文档校验网关"""

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        *,
        simulation_delay: float = DEFAULT_SIMULATION_DELAY,
        prompt: str = VERIFICATION_PROMPT,
    ):
        """
        Args:
            provider: 模型 Provider；为 None 表示未配置凭证，走模拟路径
            simulation_delay: 模拟路径的等待时间 (秒)
            prompt: 固定指令文本
        """
        self.provider = provider
        self.simulation_delay = simulation_delay
        self.prompt = prompt

    @classmethod
    def from_config(cls, config: AppConfig) -> "VerificationGateway":
        return cls(
            provider=create_provider(config.llm),
            simulation_delay=config.verification.simulation_delay_ms / 1000,
        )

    @property
    def is_simulated(self) -> bool:
        return self.provider is None

    async def verify(self, document: bytes, mime_type: str) -> VerificationOutcome:
        """
        校验一份文档

        Args:
            document: 图片字节
            mime_type: 图片 MIME 类型

        Returns:
            VerificationOutcome（失败时为兜底结论）
        """
        if self.provider is None:
            logger.warning("No API key found, simulating AI verification.")
            await asyncio.sleep(self.simulation_delay)
            return SIMULATED_OUTCOME

        result = await self._request(document, mime_type)
        if not result.is_ok():
            logger.error(f"AI Verification failed: {result.error}")
        return result.unwrap_or(FALLBACK_OUTCOME)

    async def _request(self, document: bytes, mime_type: str) -> Result[VerificationOutcome, HopeBridgeError]:
        """单次请求 + 解析，不抛异常"""
        image_b64 = encode_document(document)
        try:
            text = await asyncio.to_thread(
                self.provider.invoke_with_image,
                self.prompt,
                image_b64,
                mime_type,
                json_output=True,
            )
        except Exception as e:
            return Result.err(ProviderError(message=str(e), context={"provider": repr(self.provider)}))

        if not text:
            return Result.err(ResponseParseError(message="No response from AI"))

        try:
            outcome = VerificationOutcome.from_dict(parse_json(text))
        except ResponseParseError as e:
            return Result.err(e)
        except ValueError as e:
            return Result.err(ResponseParseError(message=f"Unexpected response shape: {e}"))

        logger.info(f"AI 校验结果: isValid={outcome.is_valid}")
        return Result.ok(outcome)
