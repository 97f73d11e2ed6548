from __future__ import annotations

import logging

import pytest

from gemini_mcp import cli
from gemini_mcp.config import Config

pytestmark = pytest.mark.unit


def test_missing_api_key_exits_with_status_one(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.ERROR, logger="gemini_mcp.cli"):
        status = cli.main([])

    assert status == 1
    messages = [r.getMessage() for r in caplog.records]
    assert any("GEMINI_API_KEY" in m for m in messages)
    assert any(m.startswith("Hint: export GEMINI_API_KEY") for m in messages)


def test_flags_are_passed_to_config(monkeypatch: pytest.MonkeyPatch) -> None:
    served: list[Config] = []

    async def fake_serve(config: Config) -> None:
        served.append(config)

    monkeypatch.setattr("gemini_mcp.server.serve", fake_serve)

    status = cli.main(
        ["--mock", "--model", "gemini-2.5-pro", "--sampling-control", "max_tokens"]
    )

    assert status == 0
    (config,) = served
    assert config.use_mock is True
    assert config.model == "gemini-2.5-pro"
    assert config.sampling_control.value == "max_tokens"


def test_log_level_defaults_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_MCP_LOG_LEVEL", "debug")

    args = cli.build_parser().parse_args([])

    assert args.log_level == "DEBUG"
