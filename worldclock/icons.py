"""Temperature to icon lookup."""
from __future__ import annotations

from typing import Any, Dict, Tuple

from .entities import is_temperature


DEFAULT_ICON = "Default"

# Checked top to bottom; the first matching threshold wins, so "Hottie" is
# shadowed by "Sunny".
THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (85, "Sunny"),
    (89, "Hottie"),
    (70, "Windy"),
    (50, "Cloudy"),
    (32, "Rainy"),
)
COLDEST_ICON = "Snowy"

ICON_GLYPHS: Dict[str, str] = {
    "Sunny": "☀",
    "Hottie": "\U0001f525",
    "Windy": "\U0001f32c",
    "Cloudy": "☁",
    "Rainy": "\U0001f327",
    "Snowy": "❄",
    DEFAULT_ICON: "\U0001f310",
}


def select_icon(temperature: Any) -> str:
    if not is_temperature(temperature):
        return DEFAULT_ICON
    for threshold, icon in THRESHOLDS:
        if temperature >= threshold:
            return icon
    return COLDEST_ICON


def glyph(icon: str) -> str:
    return ICON_GLYPHS.get(icon, ICON_GLYPHS[DEFAULT_ICON])


__all__ = ["select_icon", "glyph", "ICON_GLYPHS", "DEFAULT_ICON"]
