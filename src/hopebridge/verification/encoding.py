"""
文档编码工具（纯函数，无 I/O）
"""

from __future__ import annotations

import base64
import mimetypes

DEFAULT_MIME_TYPE = "image/jpeg"


def encode_document(data: bytes) -> str:
    """把文档字节编码为 base64 字符串（不含 data URL 前缀）"""
    return base64.b64encode(data).decode("ascii")


def guess_mime_type(filename: str, default: str = DEFAULT_MIME_TYPE) -> str:
    """按文件名猜测 MIME 类型"""
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or default
