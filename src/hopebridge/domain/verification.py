"""
文档校验结果模型
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class VerificationOutcome:
    """单次上传的校验结论，不做持久化"""
    is_valid: bool
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"isValid": self.is_valid, "reason": self.reason}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerificationOutcome":
        """
        按模型返回的 JSON 结构解析

        Raises:
            ValueError: 缺少字段或类型不符
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected JSON object, got {type(data).__name__}")
        is_valid = data.get("isValid")
        reason = data.get("reason")
        if not isinstance(is_valid, bool):
            raise ValueError("'isValid' must be a boolean")
        if not isinstance(reason, str):
            raise ValueError("'reason' must be a string")
        return cls(is_valid=is_valid, reason=reason)
