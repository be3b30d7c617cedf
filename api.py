"""
Numeral Text: FastAPI Server
============================

HTTP access to the number-to-text converter.

Endpoints:
    POST /convert           Convert a number to words / ordinal / currency / Roman
    GET  /languages         Supported languages and their accepted aliases
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numeral_text import (
    ConversionOptions,
    Language,
    NumberConversionError,
    __version__,
    convert,
)
from numeral_text.config import load_settings
from numeral_text.rules import RULE_TABLES

load_dotenv()

logger = logging.getLogger(__name__)

settings = load_settings()

LANGUAGE_NAMES: dict[Language, str] = {
    Language.ENGLISH: "English",
    Language.SPANISH: "Español",
    Language.ARABIC: "العربية",
}


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Text API",
    description=(
        "Spell integers out as words, ordinals, currency phrases and Roman "
        "numerals in English, Spanish and Arabic."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: Union[int, str] = Field(
        ...,
        description="Integer, or a numeric string (decimals allowed in currency mode).",
        json_schema_extra={"example": 1234},
    )
    language: Optional[str] = Field(
        None, description="Language code or name; defaults to the server setting."
    )
    ordinal: bool = False
    currency: Optional[str] = Field(None, description="Currency code, e.g. USD.")
    roman: bool = False


class ConvertResponse(BaseModel):
    """Rendered text plus the options that produced it."""

    text: str
    value: str
    language: str
    mode: str

    model_config = {"json_schema_extra": {"example": {
        "text": "One Thousand Two Hundred and Thirty Four",
        "value": "1234",
        "language": "en",
        "mode": "words",
    }}}


class LanguageOut(BaseModel):
    code: str
    name: str
    aliases: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _error_detail(error: NumberConversionError) -> dict:
    return {"code": error.code, "message": str(error), "details": error.details}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to text",
    tags=["Conversion"],
    responses={422: {"description": "Invalid value, language, currency or range"}},
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Convert a number using the same precedence as the library:
    **roman** → **currency** → **ordinal** → plain words.
    """
    try:
        options = ConversionOptions(
            language=request.language or settings.default_language,
            ordinal=request.ordinal,
            currency=request.currency,
            roman=request.roman,
        )
        text = convert(request.value, options)
    except NumberConversionError as exc:
        logger.warning("Conversion rejected [%s]: %s", exc.code, exc)
        raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc

    logger.info("Converted %s (%s, %s)", request.value, options.language.value, options.mode.value)
    return ConvertResponse(
        text=text,
        value=str(request.value),
        language=options.language.value,
        mode=options.mode.value,
    )


@app.get("/languages", summary="List supported languages", tags=["Conversion"])
def list_languages() -> list[LanguageOut]:
    return [
        LanguageOut(code=language.value, name=LANGUAGE_NAMES[language], aliases=list(language.aliases))
        for language in RULE_TABLES
    ]


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(RULE_TABLES),
    )
