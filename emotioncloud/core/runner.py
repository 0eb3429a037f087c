# emotioncloud/core/runner.py
"""
CLI entrypoint: load words (or comments -> words), lay out, render, export.
Default input: data/sample_comments.txt (repo-relative).
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from emotioncloud.core.config import (
    DEFAULT_COMMENTS_PATH,
    DEFAULT_HEIGHT_PX,
    DEFAULT_WIDTH_PX,
    REPORTS_DIR,
    TOP_WORDS,
)
from emotioncloud.core.diagnostics import summarize_layout
from emotioncloud.core.error_codes import EMPTY_WORDS, user_message
from emotioncloud.core.io import load_comments, load_words
from emotioncloud.core.layout import layout
from emotioncloud.core.render import render_png, render_svg
from emotioncloud.core.reporting import (
    ensure_report_dir,
    write_placements_json,
    write_run_metadata_json,
)
from emotioncloud.core.text_analysis import build_word_entries
from emotioncloud.core.types import CanvasDimensions, WordEntry

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Emotion word-cloud layout and rendering.")
    p.add_argument("--words", type=str, default=None, help="Words JSON path (text, weight, color)")
    p.add_argument("--comments", type=str, default=None, help="Comments path (.txt/.csv/.json); default: sample comments")
    p.add_argument("--sentiment", type=str, default="all", choices=["all", "positive", "negative", "suggestions"],
                   help="Only use comments of this class (with --comments)")
    p.add_argument("--top", type=int, default=TOP_WORDS, help="Max words taken from comments")
    p.add_argument("--width", type=float, default=DEFAULT_WIDTH_PX, help="Canvas width (px)")
    p.add_argument("--height", type=float, default=DEFAULT_HEIGHT_PX, help="Canvas height (px)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--format", type=str, default="both", choices=["png", "svg", "both"], dest="fmt", help="Image output")
    p.add_argument("--renderer", type=str, default="pillow", choices=["pillow", "matplotlib"], help="PNG renderer")
    return p.parse_args(argv)


def load_input_words(
    repo_root: Path,
    words_path: str | None,
    comments_path: str | None,
    sentiment: str = "all",
    top: int = TOP_WORDS,
) -> tuple[list[WordEntry], str]:
    """Words from --words, else from comments. Returns (words, input_path used)."""
    if words_path:
        return load_words(words_path, repo_root=repo_root), words_path
    source = comments_path or DEFAULT_COMMENTS_PATH
    comments = load_comments(source, repo_root=repo_root)
    return build_word_entries(comments, sentiment=sentiment, limit=top), source


def main(argv: list[str] | None = None) -> None:
    _log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    dims = CanvasDimensions(width=args.width, height=args.height)

    words, input_path = load_input_words(repo_root, args.words, args.comments, args.sentiment, args.top)
    warnings: list[str] = []
    if not words:
        warnings.append(EMPTY_WORDS)
        logger.warning(user_message(EMPTY_WORDS))

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    outputs: list[Path] = []
    if args.fmt in ("png", "both"):
        png_path = report_dir / "cloud.png"
        render_png(words, png_path, dims, renderer=args.renderer)
        outputs.append(png_path)
    if args.fmt in ("svg", "both"):
        svg_path = report_dir / "cloud.svg"
        render_svg(words, svg_path, dims)
        outputs.append(svg_path)

    placements = layout(words, dims)
    summary = summarize_layout(placements, dims)
    if summary.overlapping_pairs:
        logger.info(f"{summary.overlapping_pairs} overlapping word pairs ({summary.overlap_area_px:.0f} px²)")
    outputs.insert(0, write_placements_json(report_dir, placements, dims, warnings, summary))
    write_run_metadata_json(report_dir, args.run_name, input_path, args.sentiment, dims, len(words))

    for p in outputs:
        print(p)
    print("Words placed:", len(placements))


if __name__ == "__main__":
    main()
