"""
Runtime settings for the CLI and HTTP entry points.

Read from the environment (a `.env` file is loaded by the entry points):

    NUMERAL_TEXT_LANGUAGE   default output language (any alias, e.g. "es", "arabic")

Values are validated eagerly: an unresolvable language fails at startup
with UnsupportedLanguage rather than silently falling back to English.
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, field_validator

from .models import Language

LANGUAGE_ENV_VAR = "NUMERAL_TEXT_LANGUAGE"


class Settings(BaseModel):
    """Process-level defaults for the outer layers."""

    model_config = {"frozen": True}

    default_language: Language = Language.ENGLISH

    @field_validator("default_language", mode="before")
    @classmethod
    def _resolve_language(cls, value: object) -> Language:
        return Language.resolve(value)  # type: ignore[arg-type]


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    raw = env.get(LANGUAGE_ENV_VAR, "").strip()
    return Settings(default_language=raw) if raw else Settings()
