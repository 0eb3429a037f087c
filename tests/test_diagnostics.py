# tests/test_diagnostics.py
"""
Overlap statistics: glyph boxes, overlapping pairs, canvas coverage.
"""

from __future__ import annotations

import pytest

from emotioncloud.core.diagnostics import glyph_box, summarize_layout
from emotioncloud.core.layout import layout
from emotioncloud.core.text_metrics import measure_text_px
from emotioncloud.core.types import CanvasDimensions, Placement, WordEntry

DIMS = CanvasDimensions(width=800, height=400)


def test_measure_text_grows_with_font_size() -> None:
    w12, h12 = measure_text_px("hello", "DejaVu Sans", 12)
    w48, h48 = measure_text_px("hello", "DejaVu Sans", 48)
    assert w12 > 0 and h12 > 0
    assert w48 > w12 and h48 > h12


def test_glyph_box_centered_on_anchor() -> None:
    p = Placement(text="hope", font_size_px=24, x=100.0, y=50.0, color="#000000")
    b = glyph_box(p)
    assert b.centroid.x == pytest.approx(100.0)
    assert b.centroid.y == pytest.approx(50.0)


def test_empty_layout_summary() -> None:
    s = summarize_layout([], DIMS)
    assert s.n_words == 0 and s.overlapping_pairs == 0 and s.coverage_ratio == 0.0


def test_identical_anchors_overlap() -> None:
    a = Placement(text="same", font_size_px=24, x=400.0, y=200.0, color="#000000")
    s = summarize_layout([a, a], DIMS)
    assert s.overlapping_pairs == 1
    assert s.overlap_area_px > 0
    assert 0 < s.coverage_ratio < 1
    assert s.boxes_outside_canvas == 0


def test_far_apart_words_do_not_overlap() -> None:
    a = Placement(text="left", font_size_px=12, x=50.0, y=50.0, color="#000000")
    b = Placement(text="right", font_size_px=12, x=750.0, y=350.0, color="#000000")
    assert summarize_layout([a, b], DIMS).overlapping_pairs == 0


def test_long_word_spills_past_edge() -> None:
    # Clamp uses font size only, so a long word at the edge can spill
    p = Placement(text="extraordinarily", font_size_px=48, x=24.0, y=200.0, color="#000000")
    assert summarize_layout([p], DIMS).boxes_outside_canvas == 1


def test_summary_counts_match_layout() -> None:
    words = [WordEntry(text=f"word{i}", weight=float(20 - i)) for i in range(20)]
    s = summarize_layout(layout(words, DIMS), DIMS)
    assert s.n_words == 20
    assert s.overlapping_pairs <= 20 * 19 // 2
