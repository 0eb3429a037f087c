# emotioncloud/core/config.py
"""
Central configuration for word-cloud layout and rendering.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
DEFAULT_COMMENTS_PATH: str = "data/sample_comments.txt"
REPORTS_DIR: str = "reports"

# ----- Canvas -----
DEFAULT_WIDTH_PX: int = 800
DEFAULT_HEIGHT_PX: int = 400

BACKGROUND_COLOR: str = "#ffffff"
"""Fill used by clear() on raster surfaces."""

# ----- Font sizing -----
MIN_FONT_PX: int = 12
"""Legibility floor for every word."""

MAX_FONT_PX: int = 48
"""Font size of the heaviest word(s)."""

DEFAULT_FONT_FAMILY: str = "DejaVu Sans"

# ----- Spiral placement -----
GOLDEN_ANGLE_DEG: float = 137.5
"""Rotation per word index. Successive words never line up on radial spokes."""

SPIRAL_BASE_RADIUS_PX: float = 50.0
"""Radius of the first word (index 0)."""

SPIRAL_RADIUS_STEP_PX: float = 8.0
"""Radius added per word index."""

SPIRAL_RADIUS_CAP_FRACTION: float = 1.0 / 3.0
"""Radius cap as a fraction of min(width, height)."""

# ----- Comment analysis -----
MIN_WORD_LENGTH: int = 4
"""Words shorter than this are dropped from frequency counts."""

TOP_WORDS: int = 50
"""Number of most frequent words passed to the layout."""

SENTIMENT_HUES: dict[str, int] = {
    "positive": 120,
    "negative": 0,
    "suggestions": 260,
}
"""HSL hue per sentiment filter. 'all' uses a golden-angle hue per word instead."""

# ----- Debug flags -----
DEBUG_LAYOUT: bool = os.environ.get("EMOTIONCLOUD_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every placement at INFO. Set env EMOTIONCLOUD_DEBUG=1 to enable."""
