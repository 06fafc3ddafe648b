"""
VerificationGateway 测试（使用桩 Provider，不访问网络）
"""

import asyncio

import pytest

from hopebridge.config import AppConfig
from hopebridge.domain import VerificationOutcome
from hopebridge.infrastructure.llm import LLMProvider, ProviderInfo
from hopebridge.verification import FALLBACK_REASON, SIMULATION_REASON, VerificationGateway
from hopebridge.verification.json_parser import parse_json
from hopebridge.core.errors import ResponseParseError


class StubProvider(LLMProvider):
    """按预设返回文本或抛出异常"""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def invoke_with_image(self, prompt, image_b64, mime_type, json_output=True, **kwargs):
        self.calls.append({"prompt": prompt, "image_b64": image_b64, "mime_type": mime_type})
        if self.error is not None:
            raise self.error
        return self.reply

    @property
    def info(self):
        return ProviderInfo(provider_name="stub", model_name="stub-1", api_base=None)


class TestSimulation:
    """未配置凭证"""

    @pytest.mark.asyncio
    async def test_simulated_outcome_after_delay(self, monkeypatch):
        slept = []

        async def fake_sleep(seconds):
            slept.append(seconds)

        monkeypatch.setattr(asyncio, "sleep", fake_sleep)
        gateway = VerificationGateway()
        outcome = await gateway.verify(b"anything", "image/png")

        assert gateway.is_simulated
        assert slept == [2.0]
        assert outcome == VerificationOutcome(True, SIMULATION_REASON)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("document", [b"", b"\x00\xff", b"not an image at all"])
    async def test_simulation_never_rejects(self, document):
        outcome = await VerificationGateway(simulation_delay=0).verify(document, "image/jpeg")
        assert outcome.is_valid is True

    def test_from_config_without_key(self):
        gateway = VerificationGateway.from_config(AppConfig())
        assert gateway.is_simulated
        assert gateway.simulation_delay == 2.0


class TestWithProvider:
    """已配置凭证"""

    @pytest.mark.asyncio
    async def test_valid_verdict(self):
        provider = StubProvider(reply='{"isValid": true, "reason": "Looks like a marks memo"}')
        outcome = await VerificationGateway(provider).verify(b"abc", "image/png")

        assert outcome == VerificationOutcome(True, "Looks like a marks memo")
        call = provider.calls[0]
        assert call["image_b64"] == "YWJj"
        assert call["mime_type"] == "image/png"
        assert "isValid" in call["prompt"]

    @pytest.mark.asyncio
    async def test_negative_verdict(self):
        provider = StubProvider(reply='{"isValid": false, "reason": "Not a marks memo"}')
        outcome = await VerificationGateway(provider).verify(b"abc", "image/jpeg")
        assert outcome.is_valid is False
        assert outcome.reason == "Not a marks memo"

    @pytest.mark.asyncio
    async def test_code_fenced_json(self):
        provider = StubProvider(reply='```json\n{"isValid": true, "reason": "ok"}\n```')
        outcome = await VerificationGateway(provider).verify(b"abc", "image/jpeg")
        assert outcome == VerificationOutcome(True, "ok")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "provider",
        [
            StubProvider(error=RuntimeError("network down")),
            StubProvider(reply=""),
            StubProvider(reply=None),
            StubProvider(reply="{not json"),
            StubProvider(reply='{"isValid": "yes", "reason": "ok"}'),
            StubProvider(reply='["isValid", true]'),
        ],
    )
    async def test_failures_fall_back(self, provider):
        outcome = await VerificationGateway(provider).verify(b"abc", "image/jpeg")
        assert outcome == VerificationOutcome(True, FALLBACK_REASON)
        assert len(provider.calls) == 1


class TestParseJson:

    def test_plain(self):
        assert parse_json('{"a": 1}') == {"a": 1}

    def test_fenced_without_language(self):
        assert parse_json('```\n{"a": 1}\n```') == {"a": 1}

    @pytest.mark.parametrize("text", ["", "   ", "{'a': 1}", "isValid: true"])
    def test_invalid(self, text):
        with pytest.raises(ResponseParseError):
            parse_json(text)
