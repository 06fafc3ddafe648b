# hopebridge/__init__.py
"""
HopeBridge - 连接求助学生与捐助者的原型应用

支持：
- 学生注册与成绩单上传
- 基于多模态大模型的文档可信度检查
- 捐助者偏好设置与学生匹配列表
- CLI 与 HTTP 两种交互入口
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "HopeBridge Team"


# 延迟导入以避免循环依赖
def __getattr__(name: str):
    """延迟导入模块"""

    # Core 模块
    if name == "SessionController":
        from hopebridge.core.controller import SessionController
        return SessionController
    if name == "AppState":
        from hopebridge.core.state import AppState
        return AppState
    if name == "UploadFlow":
        from hopebridge.core.upload_flow import UploadFlow
        return UploadFlow

    # Verification 模块
    if name == "VerificationGateway":
        from hopebridge.verification.gateway import VerificationGateway
        return VerificationGateway

    # Config
    if name == "AppConfig":
        from hopebridge.config.models import AppConfig
        return AppConfig

    raise AttributeError(f"module 'hopebridge' has no attribute '{name}'")


__all__ = [
    "__version__",
    "SessionController",
    "AppState",
    "UploadFlow",
    "VerificationGateway",
    "AppConfig",
]
