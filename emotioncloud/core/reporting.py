# emotioncloud/core/reporting.py
"""
Create reports/<run_name>/ and write placements.json, run_metadata.json.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from emotioncloud.core.config import (
    BACKGROUND_COLOR,
    DEFAULT_FONT_FAMILY,
    GOLDEN_ANGLE_DEG,
    MAX_FONT_PX,
    MIN_FONT_PX,
    REPORTS_DIR,
    SPIRAL_BASE_RADIUS_PX,
    SPIRAL_RADIUS_CAP_FRACTION,
    SPIRAL_RADIUS_STEP_PX,
)
from emotioncloud.core.diagnostics import LayoutSummary
from emotioncloud.core.types import CanvasDimensions, Placement

SCHEMA_VERSION = "1.0"


def placement_to_dict(p: Placement) -> dict:
    return {
        "text": p.text,
        "font_size_px": p.font_size_px,
        "anchor_px": {"x": p.x, "y": p.y},
        "color": p.color,
    }


def placements_to_dict(
    placements: Sequence[Placement],
    dims: CanvasDimensions,
    warnings: list[str] | None = None,
    summary: LayoutSummary | None = None,
) -> dict:
    """Structure for placements.json. summary is included only when given."""
    out = {
        "schema_version": SCHEMA_VERSION,
        "canvas": {"width_px": dims.width, "height_px": dims.height},
        "placements": [placement_to_dict(p) for p in placements],
        "warnings": list(warnings or []),
    }
    if summary is not None:
        out["summary"] = asdict(summary)
    return out


def run_metadata_dict(
    run_name: str,
    input_path: str | None,
    sentiment: str,
    dims: CanvasDimensions,
    n_words: int,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "input_path": input_path,
        "sentiment": sentiment,
        "width_px": dims.width,
        "height_px": dims.height,
        "n_words": n_words,
        "config": {
            "MIN_FONT_PX": MIN_FONT_PX,
            "MAX_FONT_PX": MAX_FONT_PX,
            "GOLDEN_ANGLE_DEG": GOLDEN_ANGLE_DEG,
            "SPIRAL_BASE_RADIUS_PX": SPIRAL_BASE_RADIUS_PX,
            "SPIRAL_RADIUS_STEP_PX": SPIRAL_RADIUS_STEP_PX,
            "SPIRAL_RADIUS_CAP_FRACTION": SPIRAL_RADIUS_CAP_FRACTION,
            "DEFAULT_FONT_FAMILY": DEFAULT_FONT_FAMILY,
            "BACKGROUND_COLOR": BACKGROUND_COLOR,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placements_json(
    report_dir: Path,
    placements: Sequence[Placement],
    dims: CanvasDimensions,
    warnings: list[str] | None = None,
    summary: LayoutSummary | None = None,
) -> Path:
    """Write placements.json to report_dir. Returns path to file."""
    path = report_dir / "placements.json"
    data = placements_to_dict(placements, dims, warnings, summary)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    input_path: str | None,
    sentiment: str,
    dims: CanvasDimensions,
    n_words: int,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, input_path, sentiment, dims, n_words)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
