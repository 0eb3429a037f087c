# emotioncloud/core/text_metrics.py
"""
Measure text width/height in px using Pillow. Single font family, no shaping.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

_font_warning_emitted: set[str] = set()


@lru_cache(maxsize=64)
def load_font(font_family: str, size_px: int):
    """Load PIL ImageFont; fallback with warning if font not found."""
    from PIL import ImageFont

    size = max(1, int(size_px))
    candidates = [
        font_family + ".ttf",
        font_family.replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except (OSError, IOError):
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default(size=size)


def measure_text_px(text: str, font_family: str, font_size_px: int) -> tuple[float, float]:
    """Return (width_px, height_px) of the ink box for text."""
    font = load_font(font_family, font_size_px)
    bbox = font.getbbox(text)
    return (float(bbox[2] - bbox[0]), float(bbox[3] - bbox[1]))
