# emotioncloud/core/colors.py
"""
Normalize CSS-style color strings (hex, names, rgb(), hsl()) to #rrggbb via Pillow.
Every surface accepts the same color values this way.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from PIL import ImageColor

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "#333333"


def hsl(hue: float, saturation: float, lightness: float) -> str:
    """CSS hsl() string; saturation and lightness are clamped to [0, 100] percent."""
    s = max(0.0, min(100.0, saturation))
    light = max(0.0, min(100.0, lightness))
    return f"hsl({hue % 360:g}, {s:g}%, {light:g}%)"


@lru_cache(maxsize=512)
def to_hex(color: str) -> str:
    """Return '#rrggbb' for color; unknown colors fall back to FALLBACK_COLOR with a warning."""
    try:
        rgb = ImageColor.getrgb(color.strip())
    except (ValueError, AttributeError):
        logger.warning(f"Unknown color {color!r}; using {FALLBACK_COLOR}")
        return FALLBACK_COLOR
    r, g, b = rgb[:3]
    return f"#{r:02x}{g:02x}{b:02x}"
