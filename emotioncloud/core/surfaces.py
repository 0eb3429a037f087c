# emotioncloud/core/surfaces.py
"""
Drawing surfaces for word-cloud rendering.
A surface exposes clear() and draw_text(); coordinates are canvas pixels with
the origin at the top-left and y growing downward.
Concrete surfaces: Pillow raster (PNG), matplotlib figure (PNG), SVG document,
and a recording surface that only remembers calls.
"""

from __future__ import annotations

import warnings
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Protocol, runtime_checkable

from emotioncloud.core.colors import to_hex
from emotioncloud.core.config import BACKGROUND_COLOR, DEFAULT_FONT_FAMILY
from emotioncloud.core.text_metrics import load_font
from emotioncloud.core.types import CanvasDimensions, HAlign, VAlign

SVG_NS = "http://www.w3.org/2000/svg"

# Pillow anchor characters: horizontal then vertical, e.g. "mm" = middle/middle
_PIL_H_ANCHOR = {"left": "l", "center": "m", "right": "r"}
_PIL_V_ANCHOR = {"top": "t", "center": "m", "bottom": "b"}

_SVG_TEXT_ANCHOR = {"left": "start", "center": "middle", "right": "end"}
_SVG_BASELINE = {"top": "hanging", "center": "central", "bottom": "text-after-edge"}


@runtime_checkable
class DrawingSurface(Protocol):
    """Capability interface the renderer draws into."""

    def clear(self) -> None:
        ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size_px: int,
        color: str,
        h_align: HAlign = "center",
        v_align: VAlign = "center",
    ) -> None:
        ...


@dataclass
class DrawCall:
    """One recorded draw_text call."""
    text: str
    x: float
    y: float
    font_size_px: int
    color: str
    h_align: str
    v_align: str


@dataclass
class RecordingSurface:
    """Remembers calls instead of drawing. clear() empties the visible draw list."""
    dims: CanvasDimensions = field(default_factory=CanvasDimensions)
    clear_count: int = 0
    draws: list[DrawCall] = field(default_factory=list)

    def clear(self) -> None:
        self.clear_count += 1
        self.draws = []

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size_px: int,
        color: str,
        h_align: HAlign = "center",
        v_align: VAlign = "center",
    ) -> None:
        self.draws.append(DrawCall(text, x, y, font_size_px, color, h_align, v_align))


class RasterSurface:
    """RGBA pixel buffer backed by Pillow."""

    def __init__(
        self,
        dims: CanvasDimensions | None = None,
        background: str = BACKGROUND_COLOR,
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        from PIL import Image, ImageDraw

        self.dims = dims or CanvasDimensions()
        self.background = to_hex(background)
        self.font_family = font_family
        size = (max(1, int(round(self.dims.width))), max(1, int(round(self.dims.height))))
        self.image = Image.new("RGBA", size, self.background)
        self._draw = ImageDraw.Draw(self.image)

    def clear(self) -> None:
        self._draw.rectangle([(0, 0), self.image.size], fill=self.background)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size_px: int,
        color: str,
        h_align: HAlign = "center",
        v_align: VAlign = "center",
    ) -> None:
        font = load_font(self.font_family, font_size_px)
        anchor = _PIL_H_ANCHOR[h_align] + _PIL_V_ANCHOR[v_align]
        self._draw.text((x, y), text, fill=to_hex(color), font=font, anchor=anchor)

    def save(self, output_path: str | Path) -> Path:
        path = Path(output_path)
        self.image.save(path, format="PNG")
        return path


class FigureSurface:
    """
    matplotlib figure with one full-canvas axes in pixel units (y inverted).
    Unavailable once closed.
    """

    DPI = 100

    def __init__(
        self,
        dims: CanvasDimensions | None = None,
        background: str = BACKGROUND_COLOR,
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        self.dims = dims or CanvasDimensions()
        self.background = to_hex(background)
        self.font_family = font_family
        # No constrained_layout: axes cover the whole canvas
        self.fig = plt.figure(
            figsize=(self.dims.width / self.DPI, self.dims.height / self.DPI),
            dpi=self.DPI,
            constrained_layout=False,
        )
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self._reset_axes()

    @property
    def available(self) -> bool:
        return self.fig is not None

    def _reset_axes(self) -> None:
        self.ax.set_xlim(0, self.dims.width)
        self.ax.set_ylim(self.dims.height, 0)
        self.ax.set_facecolor(self.background)
        self.ax.axis("off")

    def clear(self) -> None:
        self.ax.cla()
        self._reset_axes()

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size_px: int,
        color: str,
        h_align: HAlign = "center",
        v_align: VAlign = "center",
    ) -> None:
        # matplotlib font sizes are points: 1 px = 72 / dpi pt
        self.ax.text(
            x, y, text,
            fontsize=font_size_px * 72.0 / self.DPI,
            fontfamily=self.font_family,
            ha=h_align, va=v_align,
            color=to_hex(color),
        )

    def save(self, output_path: str | Path | IO[bytes]) -> str | Path | IO[bytes]:
        """Save PNG to a path or a binary file object."""
        path = Path(output_path) if isinstance(output_path, str) else output_path
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
            self.fig.savefig(path, dpi=self.DPI, facecolor=self.background)
        return path

    def close(self) -> None:
        import matplotlib.pyplot as plt

        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None


class SvgSurface:
    """Self-contained SVG document; one <text> element per draw call."""

    def __init__(
        self,
        dims: CanvasDimensions | None = None,
        background: str = BACKGROUND_COLOR,
        font_family: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        self.dims = dims or CanvasDimensions()
        self.background = to_hex(background)
        self.font_family = font_family
        # Plain tag names with xmlns set once (no {ns}svg Clark notation)
        self.root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NS,
                "width": f"{self.dims.width:g}",
                "height": f"{self.dims.height:g}",
                "viewBox": f"0 0 {self.dims.width:g} {self.dims.height:g}",
            },
        )
        self.clear()

    def clear(self) -> None:
        for child in list(self.root):
            self.root.remove(child)
        ET.SubElement(
            self.root,
            "rect",
            {"x": "0", "y": "0", "width": "100%", "height": "100%", "fill": self.background},
        )

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size_px: int,
        color: str,
        h_align: HAlign = "center",
        v_align: VAlign = "center",
    ) -> None:
        el = ET.SubElement(
            self.root,
            "text",
            {
                "x": f"{x:.2f}",
                "y": f"{y:.2f}",
                "font-family": self.font_family,
                "font-size": str(font_size_px),
                "fill": to_hex(color),
                "text-anchor": _SVG_TEXT_ANCHOR[h_align],
                "dominant-baseline": _SVG_BASELINE[v_align],
            },
        )
        el.text = text

    @property
    def text_elements(self) -> list[ET.Element]:
        return self.root.findall("text")

    def to_string(self) -> str:
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(self.root, encoding="unicode", method="xml")

    def save(self, output_path: str | Path) -> Path:
        path = Path(output_path)
        path.write_text(self.to_string(), encoding="utf-8")
        return path
