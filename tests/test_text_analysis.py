# tests/test_text_analysis.py
"""
Comment classification, tokenizing, word frequencies and colors.
"""

from __future__ import annotations

import pytest

from emotioncloud.core.colors import FALLBACK_COLOR, hsl, to_hex
from emotioncloud.core.text_analysis import (
    build_word_entries,
    classify_comment,
    filter_comments,
    sentiment_breakdown,
    tokenize,
    word_frequencies,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("I support this, it is great", "positive"),
        ("This is a terrible waste of money", "negative"),
        ("Could we consider a trial?", "suggestion"),
        ("The meeting is on Tuesday", "neutral"),
    ],
)
def test_classify_comment(text: str, expected: str) -> None:
    assert classify_comment(text) == expected


def test_question_mark_breaks_tie_toward_suggestion() -> None:
    # One positive keyword, one suggestion keyword; '?' adds 0.5 to suggestion
    assert classify_comment("Great, perhaps") == "positive"
    assert classify_comment("Great, perhaps?") == "suggestion"


def test_tokenize_drops_short_and_stop_words() -> None:
    assert tokenize("The bike lanes, the BIKE lanes!") == ["bike", "lanes", "bike", "lanes"]
    assert tokenize("") == []


def test_tokenize_splits_on_non_ascii_letters() -> None:
    # Accented letters count as separators, so "café" leaves only "caf" (too short)
    assert tokenize("café menu") == ["menu"]
    assert tokenize("résumé review") == ["review"]


def test_word_frequencies_counts() -> None:
    counts = word_frequencies(["bike lanes bike", "lanes bike safety"])
    assert counts["bike"] == 3
    assert counts["lanes"] == 2
    assert counts["safety"] == 1


def test_build_word_entries_order_and_colors() -> None:
    entries = build_word_entries(["bike lanes bike", "lanes bike safety"])
    assert [e.text for e in entries] == ["bike", "lanes", "safety"]
    assert [e.weight for e in entries] == [3.0, 2.0, 1.0]
    assert entries[0].color == "hsl(0, 60%, 50%)"
    assert entries[1].color == "hsl(137.5, 60%, 50%)"


def test_build_word_entries_limit() -> None:
    entries = build_word_entries(["alpha bravo charlie delta echo"], limit=2)
    assert [e.text for e in entries] == ["alpha", "bravo"]


def test_build_word_entries_positive_filter() -> None:
    comments = ["great great support", "terrible waste"]
    entries = build_word_entries(comments, sentiment="positive")
    assert [e.text for e in entries] == ["great", "support"]
    assert entries[0].color == "hsl(120, 60%, 44%)"


def test_filter_comments_unknown_sentiment() -> None:
    with pytest.raises(ValueError):
        filter_comments(["anything"], sentiment="angry")  # type: ignore[arg-type]


def test_sentiment_breakdown_has_all_keys() -> None:
    out = sentiment_breakdown(["great", "terrible", "should we?", "hello"])
    assert out == {"positive": 1, "negative": 1, "suggestion": 1, "neutral": 1}


def test_hsl_clamps_percentages() -> None:
    assert hsl(0, 150, 120) == "hsl(0, 100%, 100%)"
    assert hsl(480, 50, 50) == "hsl(120, 50%, 50%)"


def test_to_hex() -> None:
    assert to_hex("red") == "#ff0000"
    assert to_hex("#00FF00") == "#00ff00"
    assert to_hex("hsl(120, 100%, 50%)") == "#00ff00"
    assert to_hex("not-a-color") == FALLBACK_COLOR
