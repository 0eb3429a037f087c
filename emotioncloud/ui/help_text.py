# emotioncloud/ui/help_text.py
"""
Reusable help strings for UI tooltips and glossary.
"""

# Short one-liners for widget help=
TOOLTIP_COMMENTS = "One comment per line. Words shorter than four letters and common stop words are ignored."
TOOLTIP_WORDS_JSON = 'JSON list like [{"text": "joy", "weight": 10, "color": "#e91e63"}]. Overrides comments.'
TOOLTIP_SENTIMENT = "Only count words from comments classified as positive, negative, or suggestions."
TOOLTIP_TOP = "Most frequent words kept for the cloud."
TOOLTIP_RENDERER = "Pillow draws straight into a pixel buffer; matplotlib renders a figure."

# Full glossary for Help & glossary expander
GLOSSARY_MD = """
### Weight
How often a word appears (or any positive number you supply). The heaviest word is drawn at 48 px;
others scale linearly, never below 12 px.

### Golden-angle spiral
Word *i* sits at angle *i* × 137.5° around the canvas center, radius 50 + 8·*i* px,
capped at a third of the smaller canvas side. Later words crowd the outer ring.

### Clamp
Anchors are pushed inside the canvas by half the font size. Words may overlap; there is no collision search.

### Sentiment
Keyword-based: each comment is labeled positive, negative, suggestion, or neutral by counting matched keywords.
"""
