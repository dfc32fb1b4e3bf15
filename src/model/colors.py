"""Color formats: convert bound color values to and from "#rrggbb" strings.

Three formats are recognized, tried in this order:

    STRING  "#ff8800"                         stored as-is
    INT     0xff8800                          packed 24-bit integer
    OBJECT  {"r": 1.0, "g": 0.53, "b": 0.0}   normalized channels in [0, 1]
            (or any object with r/g/b attributes)

OBJECT matches any remaining object, so it must stay last. The OBJECT format
is not primitive: from_hex() writes the channels into the existing target
instead of returning a new value, so a long-lived color object bound to a
controller keeps its identity.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from constants import CHANNEL_MAX
from model.binding import ValueShape, classify

_HEX6 = re.compile(r"#?([0-9a-fA-F]{6})")
_HEX3 = re.compile(r"#?([0-9a-fA-F]{3})")


@dataclass(frozen=True)
class ColorFormat:
    """A color representation with its hex conversions."""

    tag: str
    is_primitive: bool
    match: Callable[[Any], bool]
    from_hex: Callable[..., Any]  # (text) for primitives, (text, target) otherwise
    to_hex: Callable[[Any], str]

    def __repr__(self) -> str:
        return f"ColorFormat({self.tag})"


def normalize_hex(text: str) -> str | None:
    """Normalize "#RGB", "RRGGBB" or "#RRGGBB" to lowercase "#rrggbb".

    Returns None if text is not a hex color.
    """
    text = text.strip()
    match = _HEX6.fullmatch(text)
    if match:
        return "#" + match.group(1).lower()
    match = _HEX3.fullmatch(text)
    if match:
        return "#" + "".join(c * 2 for c in match.group(1).lower())
    return None


def _int_from_hex(text: str, target: Any = None) -> int:
    return int(text[1:], 16)


def _int_to_hex(value: int) -> str:
    return f"#{int(value):06x}"


def _read_channel(value: Any, channel: str) -> float:
    if isinstance(value, Mapping):
        return float(value[channel])
    return float(getattr(value, channel))


def _write_channel(target: Any, channel: str, level: float) -> None:
    if isinstance(target, Mapping):
        target[channel] = level
    else:
        setattr(target, channel, level)


def _to_byte(level: float) -> int:
    # Out-of-range channels would overflow into their neighbours when packed.
    level = max(0.0, min(1.0, level))
    return int(round(level * CHANNEL_MAX))


def _object_from_hex(text: str, target: Any) -> None:
    packed = _int_from_hex(text)
    _write_channel(target, "r", (packed >> 16 & CHANNEL_MAX) / CHANNEL_MAX)
    _write_channel(target, "g", (packed >> 8 & CHANNEL_MAX) / CHANNEL_MAX)
    _write_channel(target, "b", (packed & CHANNEL_MAX) / CHANNEL_MAX)


def _object_to_hex(value: Any) -> str:
    r, g, b = (_to_byte(_read_channel(value, c)) for c in "rgb")
    return _int_to_hex(r << 16 | g << 8 | b)


STRING = ColorFormat(
    tag="string",
    is_primitive=True,
    match=lambda value: classify(value) is ValueShape.STRING,
    from_hex=lambda text, target=None: text,
    to_hex=lambda value: value,
)

INT = ColorFormat(
    tag="int",
    is_primitive=True,
    match=lambda value: classify(value) is ValueShape.NUMBER,
    from_hex=_int_from_hex,
    to_hex=_int_to_hex,
)

OBJECT = ColorFormat(
    tag="object",
    is_primitive=False,
    match=lambda value: classify(value) is ValueShape.OBJECT,
    from_hex=_object_from_hex,
    to_hex=_object_to_hex,
)

FORMATS: tuple[ColorFormat, ...] = (STRING, INT, OBJECT)


def detect(value: Any) -> ColorFormat | None:
    """Return the first format matching value, or None."""
    for color_format in FORMATS:
        if color_format.match(value):
            return color_format
    return None
