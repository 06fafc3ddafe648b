"""
模型响应的 JSON 解析
"""

import json
import re
from typing import Any

from hopebridge.core.errors import ResponseParseError

_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


def parse_json(text: str) -> Any:
    """
    解析 JSON 文本。

    只清理代码块标记，不做任何修复；解析失败即视为响应不合法。

    Raises:
        ResponseParseError: 空响应或解析失败
    """
    if not text or not isinstance(text, str):
        raise ResponseParseError(message="空响应或类型错误")
    cleaned = text.strip()
    match = _FENCE_RE.match(cleaned)
    if match:
        cleaned = match.group(1)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseParseError(message=f"JSON 解析失败: {e}", context={"text": cleaned[:200]}) from e
