from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from app.core.errors import ValidationError


class MessageOut(BaseModel):
    message: str


def require_fields(payload: BaseModel, fields: tuple[str, ...], message: str) -> dict[str, str]:
    """
    Pull the named fields off a request body as stripped strings.

    Every field must be present and non-blank, otherwise ValidationError
    with the endpoint's message. Numbers are accepted and turned into text.
    """
    values: dict[str, str] = {}
    for name in fields:
        raw: Any = getattr(payload, name, None)
        if raw is None:
            raise ValidationError(message)
        value = str(raw).strip()
        if not value:
            raise ValidationError(message)
        values[name] = value
    return values
