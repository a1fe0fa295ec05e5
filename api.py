"""
numwords: FastAPI Server
========================

HTTP front end for number-to-words conversion. NUMWORDS_* settings are read
from the environment, or from a ``.env`` file in the working directory.

Endpoints:
    POST /convert           Convert a number to cardinal words
    GET  /languages         Supported language codes
    GET  /health            Health check with the number of languages loaded

Serve with ``uvicorn api:app`` (install the ``server`` extra).
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

import numwords
from numwords.config import get_settings
from numwords.exceptions import NumWordsError
from numwords.models import ConversionOptions, Gender, Script
from numwords.registry import get_converter

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger(__name__)

# ─── Error → HTTP status ─────────────────────────────────────────────

_STATUS_BY_CODE = {
    "INVALID_TYPE": 400,
    "INVALID_FORMAT": 400,
    "NOT_A_NUMBER": 400,
    "INVALID_OPTIONS": 400,
    "UNSUPPORTED_LOCALE": 404,
    "MISSING_VOCABULARY": 500,
    "LOCALE_DATA_INVALID": 500,
}


# ─── Application Lifespan (pre-warm default converter) ──────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Apply the configured log level and build the default converter."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    get_converter(ConversionOptions())
    logger.info(
        "numwords API ready: default_lang=%s, %d languages",
        settings.default_lang,
        len(numwords.supported_languages()),
    )
    yield


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="numwords API",
    description=(
        "Convert numbers to cardinal words in many languages. "
        "Arbitrary-size integers, decimals, gendered forms and regional variants."
    ),
    version=numwords.__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    # int before float: JSON 12 stays an int instead of becoming 12.0
    value: Union[int, float, str] = Field(
        ...,
        description="The number to convert. Strings keep their exact decimal digits.",
        json_schema_extra={"example": "1234.05"},
    )
    lang: Optional[str] = Field(default=None, json_schema_extra={"example": "en"})
    gender: Optional[Gender] = None
    script: Optional[Script] = None
    region: Optional[str] = None
    formal: Optional[bool] = None
    drop_spaces: Optional[bool] = None
    space_separator: Optional[str] = None

    model_config = {"json_schema_extra": {"example": {"value": "1234.05", "lang": "en"}}}

    def options(self) -> dict:
        return self.model_dump(exclude={"value"}, exclude_none=True)


class ConvertResponse(BaseModel):
    value: str
    lang: str
    words: str


class LanguagesResponse(BaseModel):
    languages: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _to_http_error(error: NumWordsError) -> HTTPException:
    """Map a conversion error to an HTTP error with a structured body."""
    status = _STATUS_BY_CODE.get(error.code, 500)
    if status >= 500:
        logger.error("Conversion failed: %s", error.message)
    return HTTPException(
        status_code=status,
        detail={"code": error.code, "message": error.message, "details": error.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to words",
    tags=["Conversion"],
    responses={
        400: {"description": "Invalid number or options"},
        404: {"description": "Unsupported language"},
        500: {"description": "Language data cannot express the number"},
    },
)
def convert_number(request: ConvertRequest) -> ConvertResponse:
    """Convert a number to cardinal words.

    Returns:
    - **words**: the number in words
    - **lang**: the language actually used (the default when none was given)
    """
    options = request.options()
    lang = options.get("lang") or get_settings().default_lang
    try:
        words = numwords.convert(request.value, **options)
    except NumWordsError as e:
        raise _to_http_error(e) from e
    return ConvertResponse(value=str(request.value), lang=lang, words=words)


@app.get("/languages", summary="Supported languages", tags=["Conversion"])
def list_languages() -> LanguagesResponse:
    return LanguagesResponse(languages=numwords.supported_languages())


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=numwords.__version__,
        languages_loaded=len(numwords.supported_languages()),
    )
