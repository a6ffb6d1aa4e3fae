from __future__ import annotations

import math

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} est obligatoire")
    return str(value).strip()


def require_number(value, field_name: str, *, minimum: float = 0.0, strict: bool = False) -> float:
    """Parse a numeric form value (accepts a decimal comma)."""
    raw = require_non_empty(value, field_name).replace(",", ".")
    try:
        number = float(raw)
    except ValueError:
        raise ValidationError(f"{field_name} doit être un nombre")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} doit être un nombre")

    if number < minimum or (strict and number == minimum):
        raise ValidationError(f"{field_name} invalide")
    return number


def require_choice(value, field_name: str, choices) -> str:
    value = require_non_empty(value, field_name)
    allowed = [getattr(c, "value", c) for c in choices]
    if value not in allowed:
        raise ValidationError(f"{field_name} invalide")
    return value
