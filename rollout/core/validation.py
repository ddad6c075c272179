"""Conversion of pydantic validation errors into per-field client errors."""

from collections.abc import Sequence
from typing import Any

VALIDATION_ERROR = "Validation failed"

# Location segments FastAPI prepends to body errors
_LOCATION_PREFIXES = ("body",)
_VALUE_ERROR_PREFIX = "Value error, "


def _field_path(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    if not parts:
        return "body"
    return ".".join(str(p) for p in parts)


def _clean_message(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Flatten pydantic error dicts into (field, message) pairs.

    One entry is produced per violated field so a client can highlight
    exact inputs. Model-level violations (e.g. an empty update) are
    reported against ``body``.

    Args:
        errors: Output of ``ValidationError.errors()`` or
            ``RequestValidationError.errors()``

    Returns:
        List of ``{"field": ..., "message": ...}`` dicts
    """
    return [
        {"field": _field_path(err.get("loc", ())), "message": _clean_message(str(err.get("msg", "")))}
        for err in errors
    ]


def validation_error_body(errors: Sequence[dict[str, Any]]) -> dict[str, Any]:
    """Build the 400 response body for a failed validation."""
    return {"error": VALIDATION_ERROR, "details": format_validation_errors(errors)}
