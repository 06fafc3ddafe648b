"""
Provider 与工厂测试（替换 SDK client，不访问网络）
"""

from types import SimpleNamespace

import pytest

from hopebridge.config import AppConfig
from hopebridge.config.models import LLMConfig
from hopebridge.infrastructure.llm import create_provider
from hopebridge.infrastructure.llm.providers.anthropic_provider import AnthropicProvider
from hopebridge.infrastructure.llm.providers.openai_provider import OpenAIProvider


class _Recorder:
    def __init__(self, response):
        self.response = response
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        return self.response


class TestFactory:

    def test_no_key_returns_none(self):
        assert create_provider(LLMConfig()) is None

    def test_openai_provider(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        provider = create_provider(LLMConfig(model="gpt-4o"))
        assert isinstance(provider, OpenAIProvider)
        assert provider.info.model_name == "gpt-4o"
        assert provider.info.provider_name == "openai"

    def test_anthropic_without_model_uses_claude_default(self, monkeypatch):
        monkeypatch.setenv("HOPEBRIDGE_LLM_PROVIDER", "anthropic")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "k")
        provider = create_provider(AppConfig.from_env().llm)
        assert isinstance(provider, AnthropicProvider)
        assert provider.info.model_name == AnthropicProvider.DEFAULT_MODEL

    def test_openai_without_model_uses_default(self):
        provider = create_provider(LLMConfig(api_key="k"))
        assert provider.info.model_name == OpenAIProvider.DEFAULT_MODEL

    def test_anthropic_provider(self):
        provider = create_provider(LLMConfig(provider="anthropic", model="claude-x", api_key="k"))
        assert isinstance(provider, AnthropicProvider)
        assert provider.info.supports_json_mode is False

    def test_openrouter_name(self):
        provider = create_provider(LLMConfig(api_key="k", base_url="https://openrouter.ai/api/v1"))
        assert provider.info.provider_name == "openrouter"


class TestOpenAIProvider:

    def test_empty_key(self):
        with pytest.raises(ValueError):
            OpenAIProvider(api_key="")

    def test_request_shape(self):
        provider = OpenAIProvider(api_key="k", model_name="gpt-4o-mini")
        message = SimpleNamespace(content='  {"isValid": true, "reason": "ok"} ')
        recorder = _Recorder(SimpleNamespace(choices=[SimpleNamespace(message=message)]))
        provider.client = SimpleNamespace(chat=SimpleNamespace(completions=recorder))

        text = provider.invoke_with_image("check", "YWJj", "image/png")

        assert text == '{"isValid": true, "reason": "ok"}'
        assert recorder.kwargs["model"] == "gpt-4o-mini"
        assert recorder.kwargs["response_format"] == {"type": "json_object"}
        content = recorder.kwargs["messages"][0]["content"]
        assert content[0]["image_url"]["url"] == "data:image/png;base64,YWJj"
        assert content[1] == {"type": "text", "text": "check"}

    def test_empty_choices(self):
        provider = OpenAIProvider(api_key="k")
        recorder = _Recorder(SimpleNamespace(choices=[]))
        provider.client = SimpleNamespace(chat=SimpleNamespace(completions=recorder))
        assert provider.invoke_with_image("check", "YWJj", "image/png", json_output=False) == ""
        assert "response_format" not in recorder.kwargs


class TestAnthropicProvider:

    def test_request_shape(self):
        provider = AnthropicProvider(api_key="k", model_name="claude-x")
        recorder = _Recorder(SimpleNamespace(content=[SimpleNamespace(text=" done ")]))
        provider.client = SimpleNamespace(messages=recorder)

        assert provider.invoke_with_image("check", "YWJj", "image/jpeg") == "done"
        image_block = recorder.kwargs["messages"][0]["content"][0]
        assert image_block["source"] == {"type": "base64", "media_type": "image/jpeg", "data": "YWJj"}

    def test_empty_content(self):
        provider = AnthropicProvider(api_key="k")
        provider.client = SimpleNamespace(messages=_Recorder(SimpleNamespace(content=[])))
        assert provider.invoke_with_image("check", "YWJj", "image/jpeg") == ""
