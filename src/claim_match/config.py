from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-1.5-pro"

_API_KEY_VARS = ("GEMINI_API_KEY", "NEXT_PUBLIC_GEMINI_API_KEY")


@dataclass(frozen=True)
class LLMConfig:
    """Settings for the LLM-backed insured extractor."""

    model: str = DEFAULT_MODEL
    api_key: str = ""
    temperature: float = 0.1
    max_output_tokens: int = 100

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "LLMConfig":
        environ = os.environ if environ is None else environ
        api_key = next((environ[var] for var in _API_KEY_VARS if environ.get(var)), "")
        values: dict[str, object] = {
            "model": environ.get("LLM_MODEL") or DEFAULT_MODEL,
            "api_key": api_key,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)  # type: ignore[arg-type]

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)
