"""Tolerant decoding for statement amounts.

The gateway reports credited/debited amounts as a JSON number, a number
wrapped in a string, an empty string or null depending on the entry. A
single malformed amount must not reject a whole statement page, so the
decoder degrades to ``None`` (absent) instead of raising.
"""

import json
import math
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-finite number: {token}")


def _as_finite_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def _parse_number_text(text: str) -> Optional[float]:
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    return _as_finite_float(value)


def decode_optional_amount(value: Any) -> Optional[float]:
    """Decode a JSON token into a present float or ``None``. Never raises."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _as_finite_float(value)
    if isinstance(value, str):
        if value == "":
            return None
        return _parse_number_text(value)
    return None


OptionalAmount = Annotated[Optional[float], BeforeValidator(decode_optional_amount)]
