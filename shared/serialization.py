"""Render backing-capability results as text content."""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel


def to_jsonable(value: Any) -> Any:
    """Convert client-library objects into plain JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if hasattr(value, "to_dict") and callable(value.to_dict):
        # python-telegram-bot objects
        return to_jsonable(value.to_dict())
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def render_text(value: Any) -> str:
    """Serialize a result into the text of a single content block.

    Strings pass through unchanged; everything else becomes indented JSON so
    that ``json.loads`` on the text reproduces the structured result.
    """
    if isinstance(value, str):
        return value
    return json.dumps(to_jsonable(value), indent=2, ensure_ascii=False, default=str)
