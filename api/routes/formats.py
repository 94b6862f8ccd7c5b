"""API routes for ODS value formats.

- Register a value format (JSON)
- Render values through a registered format
- Export a format as number:*-style XML
- Load the default format set for a locale
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Literal, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from services.engine_config import get_engine_settings
from services.ods_engine import (
    FormatRegistry,
    ValueFormat,
    ValueFormatError,
    value_format_to_xml,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/formats", tags=["formats"])

# In-memory registry shared by all requests
_registry = FormatRegistry()


def get_registry() -> FormatRegistry:
    return _registry


def reset_registry(load_defaults: Optional[bool] = None) -> FormatRegistry:
    """Replace the registry, optionally preloading the default formats."""
    global _registry
    settings = get_engine_settings()
    if load_defaults is None:
        load_defaults = settings.load_default_formats
    if load_defaults:
        _registry = FormatRegistry.with_defaults(settings.default_locale)
    else:
        _registry = FormatRegistry()
    return _registry


# =============================================================================
# MODELS
# =============================================================================

class RenderRequest(BaseModel):
    """Request to render a value through a format."""
    kind: Literal["boolean", "float", "string", "datetime", "duration"]
    value: bool | float | str  # datetime: ISO 8601, duration: seconds


class RenderResponse(BaseModel):
    name: str
    text: str


class RegisterResponse(BaseModel):
    name: str
    parts: int


# =============================================================================
# HELPERS
# =============================================================================

def _get_format(name: str) -> ValueFormat:
    value_format = _registry.format(name)
    if value_format is None:
        raise HTTPException(status_code=404, detail="Value format not found")
    return value_format


def _render(value_format: ValueFormat, request: RenderRequest) -> str:
    value = request.value
    if request.kind == "boolean":
        if not isinstance(value, bool):
            raise ValueError(f"Expected a boolean, got {value!r}")
        return value_format.format_boolean(value)
    if request.kind == "float":
        if isinstance(value, bool):
            raise ValueError(f"Expected a number, got {value!r}")
        return value_format.format_float(float(value))
    if request.kind == "string":
        return value_format.format_str(str(value))
    if request.kind == "datetime":
        return value_format.format_datetime(datetime.fromisoformat(str(value)))
    if isinstance(value, bool):
        raise ValueError(f"Expected seconds, got {value!r}")
    return value_format.format_time_duration(timedelta(seconds=float(value)))


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/", response_model=RegisterResponse)
async def register_format(value_format: ValueFormat):
    """Register a value format. Nameless formats get a generated name."""
    name = _registry.add_format(value_format)
    logger.info(f"Registered value format {name} ({value_format.value_type.value}, {len(value_format.parts)} parts)")
    return RegisterResponse(name=name, parts=len(value_format.parts))


@router.get("/")
async def list_formats():
    """List the registered format names with their value types."""
    return [
        {"name": f.name, "value_type": f.value_type.value}
        for f in _registry
    ]


@router.post("/defaults")
async def load_defaults(locale: Optional[str] = None):
    """Add the default formats for a locale to the registry."""
    locale = locale or get_engine_settings().default_locale
    try:
        defaults = FormatRegistry.with_defaults(locale)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    for value_format in defaults:
        _registry.add_format(value_format)
    return {"locale": locale, "names": [f.name for f in defaults]}


@router.get("/{name}", response_model=ValueFormat)
async def get_format(name: str):
    """Get a value format as JSON."""
    return _get_format(name)


@router.delete("/{name}")
async def delete_format(name: str):
    if _registry.remove_format(name) is None:
        raise HTTPException(status_code=404, detail="Value format not found")
    return {"deleted": name}


@router.post("/{name}/render", response_model=RenderResponse)
async def render_value(name: str, request: RenderRequest):
    """Render a value through a registered format."""
    value_format = _get_format(name)
    try:
        text = _render(value_format, request)
    except (ValueFormatError, ValueError, OverflowError) as e:
        raise HTTPException(status_code=422, detail=f"Failed to render value: {e}")
    return RenderResponse(name=name, text=text)


@router.get("/{name}/xml")
async def export_format_xml(name: str):
    """Get a value format as its number:*-style XML element."""
    value_format = _get_format(name)
    return Response(content=value_format_to_xml(value_format), media_type="application/xml")


reset_registry()
