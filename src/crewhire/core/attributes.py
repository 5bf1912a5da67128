"""Typed attribute reads that fall back to defaults instead of raising."""

from __future__ import annotations

import math
from enum import Enum
from typing import TypeVar

from ..adapters import AttributeNode

E = TypeVar("E", bound=Enum)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def attr_str(node: AttributeNode, name: str, default: str = "") -> str:
    value = node.get(name)
    if value is None:
        return default
    return value.strip()


def attr_identifier(node: AttributeNode, name: str, default: str = "") -> str:
    """Identifiers are compared case-insensitively elsewhere; keep the source spelling."""
    return attr_str(node, name, default)


def attr_bool(node: AttributeNode, name: str, default: bool = False) -> bool:
    value = node.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    return default


def attr_int(node: AttributeNode, name: str, default: int = 0) -> int:
    value = node.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        pass
    try:
        parsed = float(value.strip())
    except ValueError:
        return default
    if math.isnan(parsed) or math.isinf(parsed):
        return default
    return int(parsed)


def attr_float(node: AttributeNode, name: str, default: float = 0.0) -> float:
    value = node.get(name)
    if value is None:
        return default
    try:
        parsed = float(value.strip())
    except ValueError:
        return default
    if math.isnan(parsed):
        return default
    return parsed


def attr_enum(node: AttributeNode, name: str, enum_type: type[E], default: E) -> E:
    value = node.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    for member in enum_type:
        if member.name.lower() == normalized or str(member.value).lower() == normalized:
            return member
    return default


def attr_range(
    node: AttributeNode,
    name: str,
    default: tuple[float, float] = (0.0, 0.0),
) -> tuple[float, float]:
    """Read ``"a,b"`` as a range, or a single number as a degenerate range."""
    value = node.get(name)
    if value is None:
        return default
    parts = [part.strip() for part in value.split(",") if part.strip()]
    try:
        numbers = [float(part) for part in parts]
    except ValueError:
        return default
    if len(numbers) == 1:
        return numbers[0], numbers[0]
    if len(numbers) == 2:
        return numbers[0], numbers[1]
    return default


def parse_color(value: str | None, default: tuple[float, ...]) -> tuple[float, float, float, float]:
    """Parse ``r,g,b[,a]`` or ``#RRGGBB[AA]`` into normalized RGBA floats."""
    if not value:
        return tuple(default)  # type: ignore[return-value]
    text = value.strip()
    if text.startswith("#"):
        hex_digits = text[1:]
        if len(hex_digits) not in (6, 8):
            return tuple(default)  # type: ignore[return-value]
        try:
            channels = [int(hex_digits[i : i + 2], 16) / 255.0 for i in range(0, len(hex_digits), 2)]
        except ValueError:
            return tuple(default)  # type: ignore[return-value]
    else:
        try:
            channels = [float(part) for part in text.split(",")]
        except ValueError:
            return tuple(default)  # type: ignore[return-value]
        if len(channels) not in (3, 4):
            return tuple(default)  # type: ignore[return-value]
        if any(channel > 1.0 for channel in channels):
            channels = [channel / 255.0 for channel in channels]
    if len(channels) == 3:
        channels.append(1.0)
    return tuple(min(max(channel, 0.0), 1.0) for channel in channels)  # type: ignore[return-value]


__all__ = [
    "attr_bool",
    "attr_enum",
    "attr_float",
    "attr_identifier",
    "attr_int",
    "attr_range",
    "attr_str",
    "parse_color",
]
