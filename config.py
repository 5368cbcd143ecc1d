"""
Centralised settings loader.

Every value comes from the process environment (or a local `.env`).
`OPENAI_KEY` has no default: a request made without it fails with a
configuration error instead of reaching the completion API.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PromptMode = Literal["template", "inline"]


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = Field("local")
    log_level: str = Field("INFO")
    cors_allow_origins: str = Field("*")

    # ─── completion API ──────────────────────────────────────────────
    openai_key: str | None = Field(None)
    openai_url: str = Field("https://api.openai.com/v1/chat/completions")
    openai_model: str = Field("gpt-4o-mini")
    openai_timeout: float | None = Field(None)   # None → wait forever

    # ─── prompt building ────────────────────────────────────────────
    prompt_mode: PromptMode = Field("template")
    prompt_template_path: str = Field("prompt/instructions.txt")

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()] or ["*"]


# ------------------------------------------------------------------ #
#  Cached singleton accessor (also a FastAPI dependency)
# ------------------------------------------------------------------ #
@lru_cache
def get_settings() -> Settings:  # pragma: no cover
    return Settings()  # type: ignore[call-arg]


settings: Settings = get_settings()
