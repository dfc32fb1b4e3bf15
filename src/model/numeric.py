"""Numeric policies for number controllers: parse, clamp, snap, map."""

from __future__ import annotations

import math
import re

from constants import DEFAULT_STEP, SLIDER_RESOLUTION

# Longest numeric prefix, the way browsers parse number text.
# "7.5px" -> 7.5, ".5" -> 0.5, "1e3" -> 1000.0, "abc" -> no match
_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_number(text: str) -> float | None:
    """Parse the leading number in text.

    Returns None when text does not start with a number (after leading
    whitespace), mirroring how a text box rejects an edit.
    """
    match = _NUMBER_PREFIX.match(text.lstrip())
    if match is None:
        return None
    token = match.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def clamp(value: float, low: float | None, high: float | None) -> float:
    """Bound value to [low, high]. An unset bound is -inf/+inf."""
    low = -math.inf if low is None else low
    high = math.inf if high is None else high
    return max(low, min(high, value))


def snap(value: float, step: float | None) -> float:
    """Round value to the nearest multiple of step.

    Multiplying by the inverse step keeps decimal steps like 0.01 exact
    (7.5 / 0.01 would give 749.9999999999999). Halves round up.
    A missing or zero step leaves the value alone, and so does a value too
    large to snap (an infinity, or one that overflows once scaled).
    """
    if not step:
        return value
    inverse_step = 1 / step
    if not math.isfinite(value * inverse_step):
        return value
    return math.floor(value * inverse_step + 0.5) / inverse_step


def map_range(value: float, in_low: float, in_high: float, out_low: float, out_high: float) -> float:
    """Linearly map value from [in_low, in_high] onto [out_low, out_high]."""
    if in_high == in_low:
        return out_low
    return (value - in_low) / (in_high - in_low) * (out_high - out_low) + out_low


def implicit_step(low: float | None, high: float | None) -> float:
    """Step used when the caller never set one explicitly."""
    if low is not None and high is not None:
        return (high - low) / SLIDER_RESOLUTION
    return DEFAULT_STEP


def format_number(value: float) -> str:
    """Format a number for a text box: 7.0 -> "7", 0.25 -> "0.25"."""
    if isinstance(value, float):
        if math.isinf(value):
            return "-Infinity" if value < 0 else "Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)
