"""
统一错误与 Result 封装，便于在边界处按严重级别降级或拒绝。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, TypeVar, Union, cast


class ErrorSeverity(Enum):
    WARNING = "warning"      # 可继续
    ERROR = "error"          # 本次操作失败
    CRITICAL = "critical"    # 会话无法继续


@dataclass
class HopeBridgeError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class ValidationError(HopeBridgeError):
    """用户输入不合法（未知字段、缺少文件等）"""
    severity: ErrorSeverity = ErrorSeverity.WARNING
    code: str = "VALIDATION_ERROR"


@dataclass
class NavigationError(HopeBridgeError):
    """严格导航模式下的非法跳转"""
    code: str = "NAVIGATION_ERROR"


@dataclass
class SessionError(HopeBridgeError):
    """会话状态冲突，例如重复设置不同角色"""
    code: str = "SESSION_ERROR"


@dataclass
class ProviderError(HopeBridgeError):
    """模型服务调用失败"""
    code: str = "LLM_ERROR"


@dataclass
class ResponseParseError(HopeBridgeError):
    """模型返回为空或不是约定的 JSON"""
    code: str = "PARSE_ERROR"


T = TypeVar("T")
E = TypeVar("E", bound=HopeBridgeError)


@dataclass
class Result(Generic[T, E]):
    """函数式结果封装，避免散落的 status 字典。"""

    _value: Union[T, E]
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_value=error, _is_ok=False)

    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def error(self) -> E | None:
        return None if self._is_ok else cast(E, self._value)

    def unwrap(self) -> T:
        if not self._is_ok:
            raise cast(E, self._value)
        return cast(T, self._value)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def map(self, fn: Callable[[T], Any]) -> "Result[Any, E]":
        if self._is_ok:
            return Result.ok(fn(cast(T, self._value)))
        return self
