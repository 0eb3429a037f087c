# emotioncloud/core/diagnostics.py
"""
Overlap statistics for a finished layout. Glyph boxes are measured with Pillow
and intersected with Shapely. Reporting only: placements are never moved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from emotioncloud.core.config import DEFAULT_FONT_FAMILY
from emotioncloud.core.text_metrics import measure_text_px
from emotioncloud.core.types import CanvasDimensions, Placement


@dataclass
class LayoutSummary:
    """Summary of one word-cloud layout."""
    n_words: int
    overlapping_pairs: int
    overlap_area_px: float
    coverage_ratio: float
    boxes_outside_canvas: int


def glyph_box(p: Placement, font_family: str = DEFAULT_FONT_FAMILY) -> Polygon:
    """Axis-aligned ink box centered on the placement anchor."""
    w, h = measure_text_px(p.text, font_family, p.font_size_px)
    return box(p.x - w / 2, p.y - h / 2, p.x + w / 2, p.y + h / 2)


def summarize_layout(
    placements: Sequence[Placement],
    dims: CanvasDimensions,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> LayoutSummary:
    """
    Count overlapping glyph pairs and their total intersection area,
    fraction of the canvas covered by glyphs, and boxes spilling past the edge
    (the anchor clamp uses font size, not text width, so long words can).
    """
    if not placements:
        return LayoutSummary(0, 0, 0.0, 0.0, 0)

    boxes = [glyph_box(p, font_family) for p in placements]
    canvas = box(0, 0, dims.width, dims.height)

    pairs = 0
    area = 0.0
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            inter = boxes[i].intersection(boxes[j])
            if not inter.is_empty and inter.area > 0:
                pairs += 1
                area += inter.area

    covered = unary_union(boxes).intersection(canvas).area
    outside = sum(1 for b in boxes if not canvas.covers(b))
    return LayoutSummary(
        n_words=len(placements),
        overlapping_pairs=pairs,
        overlap_area_px=float(area),
        coverage_ratio=float(covered / canvas.area) if canvas.area > 0 else 0.0,
        boxes_outside_canvas=outside,
    )
