# emotioncloud/ui/app.py
"""
Streamlit UI: sidebar (input, sentiment, canvas size, renderer), tabs Cloud / Placements / Export.
Run: streamlit run emotioncloud/ui/app.py
"""

from __future__ import annotations

import io
import json
import logging
import os
import sys
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file
_repo_root = Path(__file__).resolve().parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import streamlit as st

from emotioncloud.core.config import DEFAULT_COMMENTS_PATH, DEFAULT_HEIGHT_PX, DEFAULT_WIDTH_PX, TOP_WORDS
from emotioncloud.core.diagnostics import summarize_layout
from emotioncloud.core.error_codes import EMPTY_WORDS, INPUT_INVALID, user_message
from emotioncloud.core.io import parse_comments, parse_words_json
from emotioncloud.core.render import render_word_cloud
from emotioncloud.core.reporting import placements_to_dict
from emotioncloud.core.surfaces import FigureSurface, RasterSurface, SvgSurface
from emotioncloud.core.text_analysis import build_word_entries, sentiment_breakdown
from emotioncloud.core.types import CanvasDimensions, WordEntry
from emotioncloud.ui.help_text import (
    GLOSSARY_MD,
    TOOLTIP_COMMENTS,
    TOOLTIP_RENDERER,
    TOOLTIP_SENTIMENT,
    TOOLTIP_TOP,
    TOOLTIP_WORDS_JSON,
)

logger = logging.getLogger(__name__)


def _default_comments() -> str:
    path = _repo_root / DEFAULT_COMMENTS_PATH
    return path.read_text(encoding="utf-8") if path.exists() else ""


def _sidebar() -> dict:
    st.sidebar.header("Input")
    comments_text = st.sidebar.text_area("Comments", value=_default_comments(), height=220, help=TOOLTIP_COMMENTS)
    words_file = st.sidebar.file_uploader("Words JSON (optional)", type=["json"], help=TOOLTIP_WORDS_JSON)
    sentiment = st.sidebar.selectbox("Sentiment", ["all", "positive", "negative", "suggestions"], help=TOOLTIP_SENTIMENT)
    top = st.sidebar.slider("Top words", 1, 100, TOP_WORDS, help=TOOLTIP_TOP)
    st.sidebar.header("Canvas")
    width = st.sidebar.number_input("Width (px)", min_value=1, max_value=4000, value=DEFAULT_WIDTH_PX)
    height = st.sidebar.number_input("Height (px)", min_value=1, max_value=4000, value=DEFAULT_HEIGHT_PX)
    renderer = st.sidebar.radio("Renderer", ["pillow", "matplotlib"], horizontal=True, help=TOOLTIP_RENDERER)
    return {
        "comments_text": comments_text,
        "words_file": words_file,
        "sentiment": sentiment,
        "top": int(top),
        "dims": CanvasDimensions(width=float(width), height=float(height)),
        "renderer": renderer,
    }


def _resolve_words(opts: dict) -> list[WordEntry] | None:
    """Words from uploaded JSON, else from comments. None when the upload is malformed."""
    if opts["words_file"] is not None:
        try:
            return parse_words_json(opts["words_file"].getvalue().decode("utf-8"))
        except (ValueError, UnicodeDecodeError) as e:
            logger.warning(f"Words upload rejected: {e}")
            return None
    comments = parse_comments(opts["comments_text"])
    return build_word_entries(comments, sentiment=opts["sentiment"], limit=opts["top"])


def _render_png_bytes(words: list[WordEntry], dims: CanvasDimensions, renderer: str) -> tuple[bytes, list]:
    buf = io.BytesIO()
    if renderer == "matplotlib":
        surface = FigureSurface(dims)
        try:
            placements = render_word_cloud(words, surface, dims)
            surface.save(buf)
        finally:
            surface.close()
    else:
        raster = RasterSurface(dims)
        placements = render_word_cloud(words, raster, dims)
        raster.image.save(buf, format="PNG")
    return buf.getvalue(), placements


def main() -> None:
    st.set_page_config(page_title="Emotion word cloud", layout="wide")
    st.title("Emotion word cloud")
    opts = _sidebar()

    words = _resolve_words(opts)
    if words is None:
        st.error(user_message(INPUT_INVALID))
        return
    if not words:
        st.info(user_message(EMPTY_WORDS))

    dims = opts["dims"]
    png_bytes, placements = _render_png_bytes(words, dims, opts["renderer"])
    svg = SvgSurface(dims)
    render_word_cloud(words, svg, dims)

    tab_cloud, tab_table, tab_export = st.tabs(["Cloud", "Placements", "Export"])
    with tab_cloud:
        st.image(png_bytes, caption=f"{len(placements)} words")
        summary = summarize_layout(placements, dims)
        c1, c2, c3 = st.columns(3)
        c1.metric("Overlapping pairs", summary.overlapping_pairs)
        c2.metric("Canvas covered", f"{summary.coverage_ratio:.0%}")
        c3.metric("Spilling past edge", summary.boxes_outside_canvas)
        if opts["words_file"] is None:
            counts = sentiment_breakdown(parse_comments(opts["comments_text"]))
            cols = st.columns(len(counts))
            for col, (label, n) in zip(cols, counts.items()):
                col.metric(label.capitalize(), n)
    with tab_table:
        rows = [
            {"text": p.text, "font_size_px": p.font_size_px, "x": round(p.x, 1), "y": round(p.y, 1), "color": p.color}
            for p in placements
        ]
        st.dataframe(rows, width="stretch")
    with tab_export:
        st.download_button("Download PNG", png_bytes, file_name="cloud.png", mime="image/png")
        st.download_button("Download SVG", svg.to_string(), file_name="cloud.svg", mime="image/svg+xml")
        st.download_button(
            "Download placements.json",
            json.dumps(placements_to_dict(placements, dims), indent=2),
            file_name="placements.json",
            mime="application/json",
        )

    with st.expander("Help & glossary"):
        st.markdown(GLOSSARY_MD)


main()
