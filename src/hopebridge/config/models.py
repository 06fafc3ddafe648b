"""
Pydantic 配置模型，支持 YAML 文件与环境变量两种加载方式。
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field

# 凭证查找顺序：通用变量优先，其次是各 provider 自己的变量
CREDENTIAL_ENV_VARS = ("HOPEBRIDGE_API_KEY", "API_KEY")
PROVIDER_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class LLMConfig(BaseModel):
    provider: Literal["openai", "anthropic"] = "openai"
    # 为空时使用各 provider 自己的默认模型
    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: float = Field(default=60.0, gt=0)
    max_tokens: int = Field(default=1024, gt=0)

    def resolve_api_key(self) -> str:
        """显式配置优先，否则按环境变量查找；找不到返回空串"""
        if self.api_key:
            return self.api_key
        for name in (*CREDENTIAL_ENV_VARS, PROVIDER_KEY_ENV[self.provider]):
            value = os.getenv(name, "")
            if value:
                return value
        return ""


class VerificationConfig(BaseModel):
    simulation_delay_ms: int = Field(default=2000, ge=0)
    auto_return_delay_ms: int = Field(default=2500, ge=0)


class NavigationConfig(BaseModel):
    strict: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    llm: LLMConfig = LLMConfig()
    verification: VerificationConfig = VerificationConfig()
    navigation: NavigationConfig = NavigationConfig()
    logging: LoggingConfig = LoggingConfig()
    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        # 保留原始数据便于排查
        kwargs = {**data, "raw": data}
        return cls(**kwargs).with_env_overrides()

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls().with_env_overrides()

    @classmethod
    def load(cls, path: str | Path | None = None) -> "AppConfig":
        """
        加载配置

        Args:
            path: YAML 路径；为空时读取 HOPEBRIDGE_CONFIG，仍为空则只用环境变量
        """
        path = path or os.getenv("HOPEBRIDGE_CONFIG")
        if path:
            return cls.from_yaml(path)
        return cls.from_env()

    def with_env_overrides(self) -> "AppConfig":
        """
        环境变量覆盖:
        - HOPEBRIDGE_LLM_PROVIDER: openai / anthropic
        - HOPEBRIDGE_LLM_MODEL: 模型名称
        - HOPEBRIDGE_LOG_LEVEL: 日志级别
        - HOPEBRIDGE_STRICT_NAVIGATION: 1/true 开启严格导航
        """
        llm_changes: Dict[str, Any] = {}
        provider = os.getenv("HOPEBRIDGE_LLM_PROVIDER")
        if provider:
            llm_changes["provider"] = provider.lower()
        model = os.getenv("HOPEBRIDGE_LLM_MODEL")
        if model:
            llm_changes["model"] = model

        changes: Dict[str, Any] = {}
        if llm_changes:
            changes["llm"] = LLMConfig(**{**self.llm.model_dump(), **llm_changes})
        level = os.getenv("HOPEBRIDGE_LOG_LEVEL")
        if level:
            changes["logging"] = self.logging.model_copy(update={"level": level.upper()})
        strict = os.getenv("HOPEBRIDGE_STRICT_NAVIGATION")
        if strict:
            changes["navigation"] = NavigationConfig(strict=strict.lower() in ("1", "true", "yes"))
        return self.model_copy(update=changes) if changes else self
