"""Unit conversion and numeric safety helpers.

All internal arithmetic is done in pounds, gallons, knots, nautical miles and
hours. Conversions happen once at the input boundary; the calculation engines
never carry a unit tag through their computations.

Typical usage example:
    from flightprep.core.units import format_duration, to_pounds

    weight_lbs = to_pounds(80.0, "KG")
    elapsed = format_duration(1.25)  # "01:15:00"
"""

import math
from typing import Any

KG_TO_LBS = 2.20462
GAL_TO_LITER = 3.78541


def to_pounds(value: float, unit: str) -> float:
    """Convert a weight entered in the given unit system to pounds.

    Args:
        value: Weight as entered.
        unit: "KG" or "LBS" (a UnitSystem member also works).

    Returns:
        Weight in pounds.

    Examples:
        >>> to_pounds(170.0, "LBS")
        170.0
    """
    return value * KG_TO_LBS if getattr(unit, "value", unit) == "KG" else value


def to_kilograms(value_lbs: float) -> float:
    """Convert pounds to kilograms for display."""
    return value_lbs / KG_TO_LBS


def gallons_to_liters(gallons: float) -> float:
    """Convert US gallons to liters for display."""
    return gallons * GAL_TO_LITER


def parse_number(value: Any, default: float = 0.0) -> float:
    """Parse a form value into a float.

    Empty strings, None, non-numeric text, NaN and infinities all map to
    ``default``, the same way the input form treats fields still being typed.

    Args:
        value: Raw value (number or text).
        default: Value returned for anything that is not a finite number.

    Returns:
        Parsed float.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def parse_optional_number(value: Any) -> float | None:
    """Parse a form value, returning None when the field is unset."""
    number = parse_number(value, default=math.nan)
    return None if math.isnan(number) else number


def safe_divide(numerator: float, denominator: float, fallback: float = 0.0) -> float:
    """Divide, substituting ``fallback`` for a non-positive or non-finite denominator.

    Every ratio in the engines has a physically positive denominator (weight,
    groundspeed), so anything else yields the fallback rather than a crash or NaN.
    """
    if not math.isfinite(denominator) or denominator <= 0:
        return fallback
    result = numerator / denominator
    return result if math.isfinite(result) else fallback


def format_duration(hours: float) -> str:
    """Render a floating-point hour count as ``HH:MM:SS``.

    Hours and minutes are floor-truncated and seconds rounded. A rounded
    value of 60 seconds carries into the minutes, so ``00:59:60`` is never
    rendered; it reads ``01:00:00``. Non-finite and negative input renders
    as ``00:00:00``.

    Args:
        hours: Duration in hours.

    Returns:
        Zero-padded duration string.

    Examples:
        >>> format_duration(1.5)
        '01:30:00'
        >>> format_duration(float("nan"))
        '00:00:00'
    """
    if not math.isfinite(hours) or hours <= 0:
        return "00:00:00"

    h = math.floor(hours)
    minutes_float = (hours - h) * 60
    m = math.floor(minutes_float)
    s = round((minutes_float - m) * 60)

    if s >= 60:
        s -= 60
        m += 1
    if m >= 60:
        m -= 60
        h += 1

    return f"{h:02d}:{m:02d}:{s:02d}"


def parse_clock(clock: str) -> float | None:
    """Parse an ``HH:MM`` clock string into decimal hours.

    Returns:
        Hours since midnight, or None when the string is empty.
    """
    if not clock or not clock.strip():
        return None
    parts = clock.strip().split(":")
    hours = parse_number(parts[0])
    minutes = parse_number(parts[1]) if len(parts) > 1 else 0.0
    return hours + minutes / 60.0


def add_hours_to_clock(clock: str, hours: float) -> str:
    """Add elapsed hours to a clock time, wrapping past midnight.

    Args:
        clock: Start time as ``HH:MM``.
        hours: Elapsed time in hours.

    Returns:
        Resulting clock time as ``HH:MM:SS``, or an empty string when the
        start time is unset.

    Examples:
        >>> add_hours_to_clock("23:30", 1.0)
        '00:30:00'
    """
    start = parse_clock(clock)
    if start is None:
        return ""
    if not math.isfinite(hours):
        hours = 0.0
    return format_duration((start + hours) % 24)
