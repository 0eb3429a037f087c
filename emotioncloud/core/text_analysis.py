# emotioncloud/core/text_analysis.py
"""
Turn policy comments into weighted words for the cloud.
Keyword-based sentiment classification, stop-word filtered word counts,
and sentiment-tinted colors.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Literal

from emotioncloud.core.colors import hsl
from emotioncloud.core.config import GOLDEN_ANGLE_DEG, MIN_WORD_LENGTH, SENTIMENT_HUES, TOP_WORDS
from emotioncloud.core.types import Sentiment, WordEntry

SentimentFilter = Literal["all", "positive", "negative", "suggestions"]

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "concerned", "worry", "worried", "problem", "issue", "cost", "expensive", "waste",
    "against", "disagree", "oppose", "bad", "wrong", "terrible", "awful", "disappointed",
    "frustrated", "angry", "outraged", "unacceptable", "ridiculous", "stupid",
)

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "great", "excellent", "amazing", "wonderful", "perfect", "love", "like", "support",
    "approve", "fantastic", "brilliant", "awesome", "good", "better", "best", "helpful",
    "beneficial", "important", "necessary", "exactly", "right", "correct", "smart",
)

SUGGESTION_KEYWORDS: tuple[str, ...] = (
    "suggest", "recommend", "should", "could", "might", "perhaps", "maybe", "consider",
    "what about", "why not", "how about", "idea", "proposal", "alternative", "instead",
    "better if", "improve", "enhancement", "modify", "change", "add", "include",
)

STOP_WORDS: frozenset[str] = frozenset("""
the is at which on a an as are was were been be have has had do does did will would
could should may might must can of in to for with by from up about into through during
before after above below between among this that these those i me my myself we our ours
ourselves you your yours yourself yourselves he him his himself she her hers herself it
its itself they them their theirs themselves what who whom whose when where why how all
any both each few more most other some such no nor not only own same so than too very
just now
""".split())

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)

_FILTER_TO_CLASS: dict[str, Sentiment] = {
    "positive": "positive",
    "negative": "negative",
    "suggestions": "suggestion",
}


def _count_matches(content: str, keywords: Iterable[str]) -> int:
    # Substring match, so "support" also counts inside "supportive"
    return sum(1 for k in keywords if k in content)


def classify_comment(text: str) -> Sentiment:
    """
    Keyword vote: suggestion wins only when strictly ahead of both others,
    then negative over positive, then positive if any, else neutral.
    A question mark adds half a point to suggestion.
    """
    content = (text or "").lower()
    negative = _count_matches(content, NEGATIVE_KEYWORDS)
    positive = _count_matches(content, POSITIVE_KEYWORDS)
    suggestion: float = _count_matches(content, SUGGESTION_KEYWORDS)
    if "?" in content:
        suggestion += 0.5

    if suggestion > negative and suggestion > positive:
        return "suggestion"
    if negative > positive:
        return "negative"
    if positive > 0:
        return "positive"
    return "neutral"


def tokenize(text: str) -> list[str]:
    """Lowercase words of at least MIN_WORD_LENGTH chars, stop words removed."""
    cleaned = _NON_WORD.sub(" ", (text or "").lower())
    return [w for w in cleaned.split() if len(w) >= MIN_WORD_LENGTH and w not in STOP_WORDS]


def filter_comments(comments: Iterable[str], sentiment: SentimentFilter = "all") -> list[str]:
    if sentiment == "all":
        return list(comments)
    if sentiment not in _FILTER_TO_CLASS:
        raise ValueError(f"Unknown sentiment filter: {sentiment!r}")
    wanted = _FILTER_TO_CLASS[sentiment]
    return [c for c in comments if classify_comment(c) == wanted]


def word_frequencies(comments: Iterable[str], sentiment: SentimentFilter = "all") -> Counter[str]:
    """Word counts over the comments matching sentiment. Insertion order is first occurrence."""
    counts: Counter[str] = Counter()
    for comment in filter_comments(comments, sentiment):
        counts.update(tokenize(comment))
    return counts


def word_color(sentiment: SentimentFilter, frequency: int, index: int) -> str:
    """
    Sentiment filters tint by hue; more frequent words get more saturated and lighter.
    'all' spreads hues with the golden angle so the palette is deterministic.
    """
    hue = SENTIMENT_HUES.get(sentiment)
    if hue is None:
        return hsl(index * GOLDEN_ANGLE_DEG, 60, 50)
    return hsl(hue, 50 + frequency * 5, 40 + frequency * 2)


def build_word_entries(
    comments: Iterable[str],
    sentiment: SentimentFilter = "all",
    limit: int = TOP_WORDS,
) -> list[WordEntry]:
    """Top `limit` words by frequency (ties keep first-seen order) as WordEntry list."""
    counts = word_frequencies(comments, sentiment)
    top = counts.most_common(limit)
    return [
        WordEntry(text=word, weight=float(freq), color=word_color(sentiment, freq, i))
        for i, (word, freq) in enumerate(top)
    ]


def sentiment_breakdown(comments: Iterable[str]) -> dict[str, int]:
    """Count of comments per class, all four keys present."""
    out = {"positive": 0, "negative": 0, "suggestion": 0, "neutral": 0}
    for c in comments:
        out[classify_comment(c)] += 1
    return out
