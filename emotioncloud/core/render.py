# emotioncloud/core/render.py
"""
Render a word cloud into a drawing surface: clear, then one centered
draw_text per placement in the word's own color.
Also file helpers that render straight to PNG/SVG.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Sequence

from emotioncloud.core.error_codes import EMPTY_WORDS, SURFACE_UNAVAILABLE, user_message
from emotioncloud.core.layout import layout
from emotioncloud.core.surfaces import DrawingSurface, FigureSurface, RasterSurface, SvgSurface
from emotioncloud.core.types import CanvasDimensions, Placement, WordEntry

logger = logging.getLogger(__name__)

RendererName = Literal["pillow", "matplotlib"]


def surface_available(surface: object) -> bool:
    """False for None, objects without clear/draw_text, or surfaces reporting available=False."""
    if surface is None:
        return False
    if not isinstance(surface, DrawingSurface):
        return False
    return bool(getattr(surface, "available", True))


def draw_placements(surface: DrawingSurface, placements: Sequence[Placement]) -> None:
    """Clear the surface fully, then draw every placement centered on its anchor."""
    surface.clear()
    for p in placements:
        surface.draw_text(p.text, p.x, p.y, p.font_size_px, p.color, h_align="center", v_align="center")


def render_word_cloud(
    words: Sequence[WordEntry],
    surface: DrawingSurface | None,
    dims: CanvasDimensions | None = None,
) -> list[Placement]:
    """
    Lay out words and draw them. Returns the placements drawn.
    Unavailable surface: logged and skipped, returns []. Empty words: surface is cleared and left blank.
    dims defaults to the surface's own dims when it has them.
    """
    if not surface_available(surface):
        logger.warning(user_message(SURFACE_UNAVAILABLE))
        return []
    if dims is None:
        dims = getattr(surface, "dims", None) or CanvasDimensions()

    placements = layout(words, dims)
    if not placements:
        logger.info(user_message(EMPTY_WORDS))
    draw_placements(surface, placements)
    return placements


def render_png(
    words: Sequence[WordEntry],
    output_path: str | Path,
    dims: CanvasDimensions | None = None,
    renderer: RendererName = "pillow",
) -> list[Placement]:
    """Render words to a PNG file with Pillow (default) or matplotlib."""
    dims = dims or CanvasDimensions()
    if renderer == "matplotlib":
        surface = FigureSurface(dims)
        try:
            placements = render_word_cloud(words, surface, dims)
            surface.save(output_path)
        finally:
            surface.close()
        return placements
    if renderer != "pillow":
        raise ValueError(f"Unknown renderer: {renderer!r}")
    raster = RasterSurface(dims)
    placements = render_word_cloud(words, raster, dims)
    raster.save(output_path)
    return placements


def render_svg(
    words: Sequence[WordEntry],
    output_path: str | Path,
    dims: CanvasDimensions | None = None,
) -> list[Placement]:
    """Render words to a self-contained SVG file."""
    dims = dims or CanvasDimensions()
    surface = SvgSurface(dims)
    placements = render_word_cloud(words, surface, dims)
    surface.save(output_path)
    return placements
