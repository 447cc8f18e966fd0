"""
Codec HTTP Router
=================
FastAPI router exposing encode/decode to other services.

Usage:
    from fastapi import FastAPI
    from asc100_core.api import create_codec_router

    app = FastAPI()
    app.include_router(create_codec_router())
"""

import dataclasses
from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .charset import MARKERS, get_charset, list_charsets
from .codec import Asc100Codec
from .config import CodecSettings, load_settings
from .exceptions import (
    Asc100Error,
    ConfigurationError,
    InvalidCharacter,
    MalformedEncoding,
    NonAsciiInput,
    StrategyMismatch,
)
from .metrics import get_metrics_text, timed_decode, timed_encode

logger = structlog.get_logger(__name__)

# Most specific first
ERROR_CODES = (
    (NonAsciiInput, "non_ascii_input"),
    (InvalidCharacter, "invalid_character"),
    (MalformedEncoding, "malformed_encoding"),
    (StrategyMismatch, "strategy_mismatch"),
    (ConfigurationError, "configuration_error"),
)


class CodecOptions(BaseModel):
    charset: Optional[str] = None
    strategy: Optional[str] = None
    filter_policy: Optional[str] = None
    alphabet: Optional[str] = None


class EncodeRequest(CodecOptions):
    text: str


class DecodeRequest(CodecOptions):
    encoded: str
    strict_padding: Optional[bool] = None


class CodecResponse(BaseModel):
    result: str
    charset: str
    strategy: str
    filter_policy: str
    alphabet: str
    input_length: int
    output_length: int
    compression_ratio: float


class CharsetInfo(BaseModel):
    name: str
    preview: str


class MarkerInfo(BaseModel):
    token: str
    index: int
    description: str


class CharsetsResponse(BaseModel):
    default: str
    charsets: List[CharsetInfo]
    markers: List[MarkerInfo]


def error_code(error: Asc100Error) -> str:
    for error_type, code in ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return "codec_error"


def error_detail(error: Asc100Error) -> Dict[str, Any]:
    """Structured fields of a codec error (position, character, index...)."""
    detail = {}
    for attr in ("position", "character", "index", "strategy", "reason"):
        value = getattr(error, attr, None)
        if value is not None:
            detail[attr] = value
    return detail


def codec_error_response(error: Asc100Error) -> JSONResponse:
    code = error_code(error)
    logger.warning("codec request rejected", code=code, error=str(error))
    return JSONResponse(
        status_code=422,
        content={
            "error": str(error),
            "code": code,
            "detail": error_detail(error),
        },
    )


def _build_codec(base: CodecSettings, options: CodecOptions, **extra) -> Asc100Codec:
    overrides = {
        key: value
        for key, value in options.model_dump(include={"charset", "strategy", "filter_policy", "alphabet"}).items()
        if value is not None
    }
    overrides.update({key: value for key, value in extra.items() if value is not None})
    return Asc100Codec(dataclasses.replace(base, **overrides).to_config())


def _response(codec: Asc100Codec, result: str, metrics) -> CodecResponse:
    return CodecResponse(
        result=result,
        input_length=metrics.input_length,
        output_length=metrics.output_length,
        compression_ratio=round(metrics.compression_ratio, 4),
        **codec.config.describe(),
    )


def create_codec_router(settings: Optional[CodecSettings] = None) -> APIRouter:
    """
    Create the codec router.

    Args:
        settings: Defaults for requests that omit options (environment when omitted)

    Returns:
        FastAPI router with /codec/encode, /codec/decode, /codec/charsets
        and /codec/metrics endpoints
    """
    base = settings or load_settings()
    router = APIRouter(prefix="/codec", tags=["Codec"])

    @router.post("/encode", response_model=CodecResponse)
    async def encode_text(request: EncodeRequest):
        """Encode text with the requested (or default) configuration."""
        try:
            codec = _build_codec(base, request)
            encoded, metrics = timed_encode(codec, request.text)
        except Asc100Error as e:
            return codec_error_response(e)
        return _response(codec, encoded, metrics)

    @router.post("/decode", response_model=CodecResponse)
    async def decode_text(request: DecodeRequest):
        """Decode an encoded string with the requested (or default) configuration."""
        try:
            codec = _build_codec(base, request, strict_padding=request.strict_padding)
            decoded, metrics = timed_decode(codec, request.encoded)
        except Asc100Error as e:
            return codec_error_response(e)
        return _response(codec, decoded, metrics)

    @router.get("/charsets", response_model=CharsetsResponse)
    async def describe_charsets() -> CharsetsResponse:
        """Available charset versions and registered markers."""
        return CharsetsResponse(
            default=get_charset(base.charset).name,
            charsets=[
                CharsetInfo(name=name, preview=get_charset(name).preview())
                for name in list_charsets()
            ],
            markers=[
                MarkerInfo(token=m.token, index=m.index, description=m.description)
                for m in MARKERS
            ],
        )

    @router.get("/metrics")
    async def codec_metrics():
        """Codec metrics in Prometheus text format."""
        return Response(
            content=get_metrics_text(),
            media_type="text/plain; version=0.0.4; charset=utf-8",
        )

    return router
