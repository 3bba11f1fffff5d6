from __future__ import annotations

import re

from app.core.errors import ValidationError

_NON_DIGITS = re.compile(r"\D")


def normalize_phone(value: str | int) -> str:
    """
    Reduce a phone number to its digits: "(555) 010-2030" -> "5550102030".
    Raises ValidationError when nothing is left.
    """
    digits = _NON_DIGITS.sub("", str(value))
    if not digits:
        raise ValidationError("Phone number must contain digits")
    return digits
