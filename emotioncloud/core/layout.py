# emotioncloud/core/layout.py
"""
Word-cloud layout: font size per word from its weight, anchor point on a
golden-angle spiral around the canvas center, hard-clamped to the canvas.
Deterministic; no collision checks (overlapping glyphs are accepted).
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from emotioncloud.core.config import (
    DEBUG_LAYOUT,
    GOLDEN_ANGLE_DEG,
    MAX_FONT_PX,
    MIN_FONT_PX,
    SPIRAL_BASE_RADIUS_PX,
    SPIRAL_RADIUS_CAP_FRACTION,
    SPIRAL_RADIUS_STEP_PX,
)
from emotioncloud.core.types import CanvasDimensions, Placement, WordEntry

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # Built-in round() is banker's rounding; 0.5 must go up.
    return int(math.floor(value + 0.5))


def font_size_px(weight: float, max_weight: float) -> int:
    """max(MIN_FONT_PX, round(weight / max_weight * MAX_FONT_PX)); ratio 0 when max_weight <= 0 or not finite."""
    ratio = weight / max_weight if max_weight > 0 else 0.0
    if not math.isfinite(ratio):
        ratio = 0.0
    return max(MIN_FONT_PX, _round_half_up(ratio * MAX_FONT_PX))


def spiral_angle_deg(index: int) -> float:
    """Golden-angle rotation for the word at zero-based index."""
    return index * GOLDEN_ANGLE_DEG


def spiral_radius(index: int, width: float, height: float) -> float:
    """Linear growth from SPIRAL_BASE_RADIUS_PX, capped at a fraction of the smaller side."""
    cap = min(width, height) * SPIRAL_RADIUS_CAP_FRACTION
    return min(SPIRAL_BASE_RADIUS_PX + index * SPIRAL_RADIUS_STEP_PX, cap)


def clamp_to_canvas(value: float, half_extent: float, dimension: float) -> float:
    """
    Clamp value into [half_extent, dimension - half_extent].
    When the interval is empty (canvas smaller than the glyph box) return the midpoint.
    """
    lo = half_extent
    hi = dimension - half_extent
    if lo > hi:
        return dimension / 2.0
    return max(lo, min(hi, value))


def spiral_point(index: int, dims: CanvasDimensions) -> tuple[float, float]:
    """Unclamped (x, y) on the spiral for index."""
    angle = math.radians(spiral_angle_deg(index))
    radius = spiral_radius(index, dims.width, dims.height)
    cx = dims.width / 2.0
    cy = dims.height / 2.0
    return (cx + math.cos(angle) * radius, cy + math.sin(angle) * radius)


def layout(words: Sequence[WordEntry], dims: CanvasDimensions | None = None) -> list[Placement]:
    """
    One Placement per word, same order as input. Empty input gives an empty list.
    Pure: the input sequence is not modified and no state is kept between calls.
    """
    if dims is None:
        dims = CanvasDimensions()
    if not words:
        return []

    # NaN/inf weights fall to the font floor and do not set the scale
    max_weight = max((w.weight for w in words if math.isfinite(w.weight)), default=0.0)
    placements: list[Placement] = []
    for i, word in enumerate(words):
        size = font_size_px(word.weight, max_weight)
        x, y = spiral_point(i, dims)
        half = size / 2.0
        placement = Placement(
            text=word.text,
            font_size_px=size,
            x=clamp_to_canvas(x, half, dims.width),
            y=clamp_to_canvas(y, half, dims.height),
            color=word.color,
        )
        if DEBUG_LAYOUT:
            logger.info(f"layout: {placement.text!r} size={size} at ({placement.x:.1f}, {placement.y:.1f})")
        placements.append(placement)

    logger.debug(f"layout: placed {len(placements)} words on {dims.width}x{dims.height}")
    return placements
