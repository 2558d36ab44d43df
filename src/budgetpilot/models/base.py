"""
Shared field types for budget records.

Rows arrive from the data store already decrypted, but partially loaded or
freshly created rows often carry blanks. Money and percent fields are
normalized to ``0.0`` instead of failing validation, so aggregation never
crashes on incomplete data.
"""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import BeforeValidator


def coerce_amount(value: Any) -> float:
    """Convert a raw numeric value to ``float``, treating junk as zero.

    ``None``, empty strings, unparsable strings, NaN and infinities all
    become ``0.0``. Numeric strings such as ``"12.50"`` are parsed.
    """
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


Amount = Annotated[float, BeforeValidator(coerce_amount)]
"""A money or percent value that defaults to zero when missing or malformed."""


def coerce_id(value: Any) -> Any:
    """Store row ids as strings; integer keys from the store compare equal to their text."""
    if value is None or isinstance(value, str):
        return value
    return str(value)


RecordId = Annotated[str, BeforeValidator(coerce_id)]
