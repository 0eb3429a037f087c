# emotioncloud/core/types.py
"""
Dataclasses for word entries, canvas size, and computed placements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from emotioncloud.core.config import DEFAULT_HEIGHT_PX, DEFAULT_WIDTH_PX

HAlign = Literal["left", "center", "right"]
VAlign = Literal["top", "center", "bottom"]
Sentiment = Literal["positive", "negative", "suggestion", "neutral"]


@dataclass(frozen=True)
class WordEntry:
    """One weighted token. color is any CSS-style color string."""
    text: str
    weight: float
    color: str = "#333333"


@dataclass(frozen=True)
class CanvasDimensions:
    """Canvas size in pixels."""
    width: float = DEFAULT_WIDTH_PX
    height: float = DEFAULT_HEIGHT_PX


@dataclass(frozen=True)
class Placement:
    """
    Font size and anchor point for one word.
    (x, y) is the glyph center in canvas pixels, y growing downward.
    """
    text: str
    font_size_px: int
    x: float
    y: float
    color: str
