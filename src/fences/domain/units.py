"""Unit normalization between display units and canonical millimetres.

Every quantity entering the domain is expressed in millimetres. Values
arriving from forms or configuration files may be strings, blanks or
``None``; they are coerced to ``0.0`` instead of raising so that a blank
field never stops a recomputation.
"""

from __future__ import annotations

import math
from typing import Any

from .value_objects import LengthUnit

__all__ = [
    "MM_PER_UNIT",
    "coerce_number",
    "format_length",
    "from_canonical",
    "round_half_up",
    "to_canonical",
    "unit_factor",
]


MM_PER_UNIT: dict[str, float] = {
    LengthUnit.MILLIMETER.value: 1.0,
    LengthUnit.CENTIMETER.value: 10.0,
    LengthUnit.METER.value: 1000.0,
}


def coerce_number(value: Any) -> float:
    """Coerce a raw input value to a finite float.

    Numbers pass through unchanged. Strings are stripped and parsed, with a
    comma accepted as decimal separator. Anything else (``None``, blanks,
    booleans, non-numeric text, NaN or infinity) becomes ``0.0``.

    Examples:
        >>> coerce_number("2,5")
        2.5
        >>> coerce_number("")
        0.0
        >>> coerce_number(None)
        0.0
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(3.5)
        4
    """
    return int(math.floor(value + 0.5))


def unit_factor(unit: LengthUnit | str) -> float:
    """Millimetres per one ``unit``; unknown units map to 1."""
    key = unit.value if isinstance(unit, LengthUnit) else str(unit)
    return MM_PER_UNIT.get(key, 1.0)


def to_canonical(value: Any, unit: LengthUnit | str) -> float:
    """Convert a value in ``unit`` to millimetres."""
    return coerce_number(value) * unit_factor(unit)


def from_canonical(mm: Any, unit: LengthUnit | str) -> float:
    """Convert millimetres to ``unit``."""
    return coerce_number(mm) / unit_factor(unit)


def format_length(mm: float, unit: LengthUnit | str = LengthUnit.MILLIMETER, digits: int = 0) -> str:
    """Format a millimetre length in a display unit, e.g. ``"2.50 m"``."""
    key = unit.value if isinstance(unit, LengthUnit) else str(unit)
    return f"{from_canonical(mm, unit):.{digits}f} {key}"
