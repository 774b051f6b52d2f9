import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from chatlog_analyzer.agents.analysis import analyze_chat_log
from chatlog_analyzer.agents.analysis.prompts import SYSTEM_INSTRUCTION
from chatlog_analyzer.services.llm import (
    ConfigurationError,
    GenerationOptions,
    TransmissionFailure,
    create_gemini_client,
)
from chatlog_analyzer.services.llm import gemini as gemini_module


def _install_fake_genai(monkeypatch, response=None, side_effect=None):
    created: list[dict] = []
    generate_content = AsyncMock(return_value=response, side_effect=side_effect)

    def fake_client(api_key):
        client = MagicMock()
        client.aio.models.generate_content = generate_content
        client.aio.aclose = AsyncMock()
        created.append({"api_key": api_key, "client": client})
        return client

    monkeypatch.setattr(gemini_module.genai, "Client", fake_client)
    return created, generate_content


@pytest.mark.parametrize("api_key", ["", "   "])
def test_factory_rejects_blank_key(monkeypatch, api_key):
    created, _ = _install_fake_genai(monkeypatch)

    with pytest.raises(ConfigurationError):
        create_gemini_client(api_key)

    assert created == []


def test_factory_builds_new_client_per_call(monkeypatch):
    created, _ = _install_fake_genai(monkeypatch)

    first = create_gemini_client("key-1")
    second = create_gemini_client("key-2")

    assert first is not second
    assert [entry["api_key"] for entry in created] == ["key-1", "key-2"]
    assert first.model == "gemini-2.5-pro"


def test_factory_honours_model_override(monkeypatch):
    _install_fake_genai(monkeypatch)
    monkeypatch.setenv("CHATLOG_ANALYZER_MODEL", "gemini-2.5-flash")

    assert create_gemini_client("key").model == "gemini-2.5-flash"
    assert create_gemini_client("key", model="gemini-custom").model == "gemini-custom"


@pytest.mark.asyncio
async def test_generate_forwards_options_to_sdk(monkeypatch):
    _, generate_content = _install_fake_genai(
        monkeypatch, response=SimpleNamespace(text='{"ok": true}')
    )
    client = create_gemini_client("key")

    text = await client.generate(
        "prompt text",
        options=GenerationOptions(
            system_instruction="be brief",
            response_mime_type="application/json",
            response_schema={
                "type": "OBJECT",
                "properties": {"ok": {"type": "BOOLEAN"}},
            },
            thinking_budget=32768,
        ),
    )

    assert text == '{"ok": true}'
    kwargs = generate_content.await_args.kwargs
    assert kwargs["model"] == "gemini-2.5-pro"
    assert kwargs["contents"] == "prompt text"
    config = kwargs["config"]
    assert config.system_instruction == "be brief"
    assert config.response_mime_type == "application/json"
    assert config.response_schema is not None
    assert config.thinking_config.thinking_budget == 32768


@pytest.mark.asyncio
async def test_generate_without_options_sends_empty_config(monkeypatch):
    _, generate_content = _install_fake_genai(
        monkeypatch, response=SimpleNamespace(text=None)
    )
    client = create_gemini_client("key")

    assert await client.generate("prompt") is None
    config = generate_content.await_args.kwargs["config"]
    assert config.system_instruction is None
    assert config.thinking_config is None


@pytest.mark.asyncio
async def test_default_factory_is_used_by_workflow(monkeypatch):
    report = {"session_summary": "ok"}
    created, generate_content = _install_fake_genai(
        monkeypatch, response=SimpleNamespace(text=json.dumps(report))
    )
    monkeypatch.setenv("API_KEY", "env-key")

    result = await analyze_chat_log("Ana: hi", "Prof. Lee")

    assert result == report
    assert [entry["api_key"] for entry in created] == ["env-key"]
    generate_content.assert_awaited_once()
    config = generate_content.await_args.kwargs["config"]
    assert config.system_instruction == SYSTEM_INSTRUCTION
    assert config.thinking_config.thinking_budget == 32768


@pytest.mark.asyncio
async def test_sdk_errors_surface_as_transmission_failure(monkeypatch):
    _install_fake_genai(
        monkeypatch, side_effect=RuntimeError("503 UNAVAILABLE: model overloaded")
    )
    monkeypatch.setenv("API_KEY", "env-key")

    with pytest.raises(TransmissionFailure, match="503 UNAVAILABLE"):
        await analyze_chat_log("Ana: hi", "Prof. Lee")


@pytest.mark.asyncio
async def test_generate_closes_sdk_client_after_success(monkeypatch):
    created, _ = _install_fake_genai(
        monkeypatch, response=SimpleNamespace(text='{"ok": true}')
    )
    client = create_gemini_client("key")

    assert await client.generate("prompt") == '{"ok": true}'

    sdk_client = created[0]["client"]
    sdk_client.aio.aclose.assert_awaited_once()
    sdk_client.close.assert_called_once()


@pytest.mark.asyncio
async def test_generate_closes_sdk_client_after_failure(monkeypatch):
    created, _ = _install_fake_genai(
        monkeypatch, side_effect=ConnectionResetError("peer reset")
    )
    client = create_gemini_client("key")

    with pytest.raises(ConnectionResetError):
        await client.generate("prompt")

    sdk_client = created[0]["client"]
    sdk_client.aio.aclose.assert_awaited_once()
    sdk_client.close.assert_called_once()
