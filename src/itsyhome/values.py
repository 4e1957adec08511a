"""Human-readable rendering of device state values."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, List, Mapping

PLACEHOLDER = "—"


def to_float(value: Any) -> float:
    """Coerce a state value to float; unsupported types become 0.0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except (OverflowError, ValueError):
            return 0.0
    return 0.0


def format_value(state: Mapping[str, Any]) -> str:
    """Summarize a device state, e.g. ``{"brightness": 75}`` -> ``"75%"``.

    Fragments always appear in the same order regardless of key order in
    ``state``. Returns :data:`PLACEHOLDER` when nothing is displayable.
    """
    parts: List[str] = []

    if "brightness" in state:
        parts.append(f"{to_float(state['brightness']):.0f}%")
    if "temperature" in state:
        parts.append(f"{to_float(state['temperature']):.1f}°")
    elif "targetTemperature" in state:
        parts.append(f"{to_float(state['targetTemperature']):.1f}°")
    if "position" in state:
        parts.append(f"{to_float(state['position']):.0f}%")
    if "humidity" in state:
        parts.append(f"{to_float(state['humidity']):.0f}% RH")
    if "speed" in state:
        parts.append(f"speed {to_float(state['speed']):.0f}%")
    locked = state.get("locked")
    if isinstance(locked, bool):
        parts.append("locked" if locked else "unlocked")

    if not parts:
        return PLACEHOLDER
    return ", ".join(parts)


def _format_float(value: float) -> str:
    # shortest round-trip digits, exponent form outside [1e-4, 1e6)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    d = Decimal(repr(value)).normalize()
    exp = d.adjusted()
    if d and (exp < -4 or exp >= 6):
        sign, digits, _ = d.as_tuple()
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(n) for n in digits[1:])
        return f"{'-' if sign else ''}{mantissa}e{'-' if exp < 0 else '+'}{abs(exp):02d}"
    return format(d, "f")


def format_raw(value: Any) -> str:
    """Render a raw state value the way the info view lists it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "<nil>"
    return str(value)
