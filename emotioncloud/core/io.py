# emotioncloud/core/io.py
"""
Load word lists and comments from files.
Words: JSON list of {text, weight|size, color?}.
Comments: JSON (strings or objects with 'content'), CSV ('content' column), or plain text lines.
"""

from __future__ import annotations

import csv
import json
import math
from pathlib import Path
from typing import Any

from emotioncloud.core.colors import FALLBACK_COLOR
from emotioncloud.core.types import WordEntry


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _read_text(path: str | Path, repo_root: Path | None) -> tuple[Path, str]:
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Input file not found: {resolved}")
    return resolved, resolved.read_text(encoding="utf-8")


def word_from_dict(item: Any) -> WordEntry:
    """WordEntry from {text, weight} or {text, size}; color optional."""
    if not isinstance(item, dict):
        raise ValueError(f"Word entry must be an object, got {type(item).__name__}")
    text = str(item.get("text", "")).strip()
    if not text:
        raise ValueError("Word entry has empty text")
    raw_weight = item.get("weight", item.get("size"))
    if isinstance(raw_weight, bool):
        raise ValueError(f"Word {text!r} has invalid weight: {raw_weight!r}")
    try:
        weight = float(raw_weight)
    except (TypeError, ValueError):
        raise ValueError(f"Word {text!r} has invalid weight: {raw_weight!r}") from None
    if not math.isfinite(weight) or weight <= 0:
        raise ValueError(f"Word {text!r} has invalid weight: {raw_weight!r}")
    return WordEntry(text=text, weight=weight, color=str(item.get("color") or FALLBACK_COLOR))


def parse_words_json(data: str) -> list[WordEntry]:
    """Parse a JSON list of word objects."""
    try:
        arr = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid words JSON: {e}") from e
    if isinstance(arr, dict) and "words" in arr:
        arr = arr["words"]
    if not isinstance(arr, list):
        raise ValueError("Words JSON must be a list")
    return [word_from_dict(item) for item in arr]


def load_words(path: str | Path, repo_root: Path | None = None) -> list[WordEntry]:
    """
    Read word entries from a JSON file.
    Raises FileNotFoundError if path is missing, ValueError if content is malformed.
    """
    _, data = _read_text(path, repo_root)
    return parse_words_json(data)


def _comments_from_json(data: str) -> list[str]:
    try:
        arr = json.loads(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid comments JSON: {e}") from e
    if isinstance(arr, dict) and "comments" in arr:
        arr = arr["comments"]
    if not isinstance(arr, list):
        raise ValueError("Comments JSON must be a list")
    out: list[str] = []
    for item in arr:
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, dict) and "content" in item:
            out.append(str(item["content"]))
        else:
            raise ValueError("Each comment must be a string or an object with 'content'")
    return out


def _comments_from_csv(data: str) -> list[str]:
    reader = csv.DictReader(data.splitlines())
    if not reader.fieldnames or "content" not in reader.fieldnames:
        raise ValueError("Comments CSV needs a 'content' column")
    return [row["content"] for row in reader if (row.get("content") or "").strip()]


def parse_comments(data: str, suffix: str = ".txt") -> list[str]:
    """Parse comments by file suffix: .json, .csv, anything else is one comment per line."""
    suffix = suffix.lower()
    if suffix == ".json":
        return _comments_from_json(data)
    if suffix == ".csv":
        return _comments_from_csv(data)
    return [line.strip() for line in data.splitlines() if line.strip()]


def load_comments(path: str | Path, repo_root: Path | None = None) -> list[str]:
    """
    Read comments from a file.
    Raises FileNotFoundError if path is missing, ValueError if content is malformed.
    """
    resolved, data = _read_text(path, repo_root)
    return parse_comments(data, resolved.suffix)
