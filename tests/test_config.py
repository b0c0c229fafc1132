from __future__ import annotations

import pytest

from greeting_demo.common.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "GREETING_TIMEOUT",
    "GREETING_PROMPT_PATH",
    "GREETING_HOST",
    "GREETING_PORT",
    "GREETING_CONFIG",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.api_key == ""
    assert s.base_url == DEFAULT_BASE_URL
    assert s.model == "gpt-3.5-turbo"
    assert s.timeout == DEFAULT_TIMEOUT == 30.0
    assert s.prompt_path is None
    assert s.completions_url == "https://api.openai.com/v1/chat/completions"


def test_yaml_then_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    cfg = tmp_path / "greeting.yaml"
    cfg.write_text("model: from-yaml\ntimeout: 5\nport: 8080\nbase_url: http://local:9000/v1/\n", encoding="utf-8")
    monkeypatch.setenv("GREETING_CONFIG", str(cfg))
    monkeypatch.setenv("OPENAI_MODEL", "from-env")

    s = Settings.from_env()

    assert s.model == "from-env"
    assert s.timeout == 5.0
    assert s.port == 8080
    assert s.completions_url == "http://local:9000/v1/chat/completions"


def test_api_key_only_from_env_and_masked(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    cfg = tmp_path / "greeting.yaml"
    cfg.write_text("api_key: from-yaml\n", encoding="utf-8")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env-secret")

    s = Settings.from_env(str(cfg))

    assert s.api_key == "sk-env-secret"
    assert "sk-env-secret" not in repr(s)
