# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import hopebridge` works without installing.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

CREDENTIAL_ENV = (
    "HOPEBRIDGE_API_KEY",
    "API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "HOPEBRIDGE_LLM_PROVIDER",
    "HOPEBRIDGE_LLM_MODEL",
    "HOPEBRIDGE_LOG_LEVEL",
    "HOPEBRIDGE_STRICT_NAVIGATION",
    "HOPEBRIDGE_CONFIG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """测试不读取开发机上的真实凭证"""
    for name in CREDENTIAL_ENV:
        monkeypatch.delenv(name, raising=False)
