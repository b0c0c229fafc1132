"""Process-wide settings, loaded once and injected where needed."""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TIMEOUT = 30.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    api_key: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    prompt_path: str | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    @classmethod
    def from_env(cls, cfg_path: str | None = None) -> "Settings":
        """
        Build settings from an optional YAML file overlaid with environment variables.

        Args:
            cfg_path: YAML file with non-secret defaults. Falls back to GREETING_CONFIG.
        """
        cfg_path = cfg_path or os.getenv("GREETING_CONFIG")
        cfg = load_cfg(cfg_path) if cfg_path else {}

        return cls(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            base_url=os.getenv("OPENAI_BASE_URL", cfg.get("base_url", DEFAULT_BASE_URL)),
            model=os.getenv("OPENAI_MODEL", cfg.get("model", DEFAULT_MODEL)),
            timeout=float(os.getenv("GREETING_TIMEOUT", cfg.get("timeout", DEFAULT_TIMEOUT))),
            prompt_path=os.getenv("GREETING_PROMPT_PATH", cfg.get("prompt_path")) or None,
            host=os.getenv("GREETING_HOST", cfg.get("host", DEFAULT_HOST)),
            port=int(os.getenv("GREETING_PORT", cfg.get("port", DEFAULT_PORT))),
        )


def load_cfg(path: str) -> dict[str, Any]:
    with open(Path(path), "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
