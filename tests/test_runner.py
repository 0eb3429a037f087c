# tests/test_runner.py
"""
CLI end to end on temporary inputs: report files written, empty input tolerated.
"""

from __future__ import annotations

import json

from emotioncloud.core.runner import main


def test_runner_from_comments(tmp_path, capsys) -> None:
    comments = tmp_path / "comments.txt"
    comments.write_text("bike lanes are great\nbike parking should improve\n", encoding="utf-8")
    main(["--repo-root", str(tmp_path), "--comments", "comments.txt", "--run-name", "cli"])
    report = tmp_path / "reports" / "cli"
    for name in ("placements.json", "run_metadata.json", "cloud.png", "cloud.svg"):
        assert (report / name).exists(), name
    data = json.loads((report / "placements.json").read_text(encoding="utf-8"))
    assert data["placements"][0]["text"] == "bike"
    assert "Words placed:" in capsys.readouterr().out


def test_runner_from_words_svg_only(tmp_path) -> None:
    words = tmp_path / "words.json"
    words.write_text(json.dumps([{"text": "joy", "weight": 10}, {"text": "calm", "weight": 5}]), encoding="utf-8")
    main(["--repo-root", str(tmp_path), "--words", str(words), "--run-name", "svg", "--format", "svg",
          "--width", "300", "--height", "200"])
    report = tmp_path / "reports" / "svg"
    assert (report / "cloud.svg").exists()
    assert not (report / "cloud.png").exists()
    meta = json.loads((report / "run_metadata.json").read_text(encoding="utf-8"))
    assert meta["width_px"] == 300 and meta["n_words"] == 2


def test_runner_empty_comments(tmp_path) -> None:
    comments = tmp_path / "empty.txt"
    comments.write_text("a an the\n", encoding="utf-8")
    main(["--repo-root", str(tmp_path), "--comments", str(comments), "--run-name", "empty", "--format", "png"])
    data = json.loads((tmp_path / "reports" / "empty" / "placements.json").read_text(encoding="utf-8"))
    assert data["placements"] == []
    assert data["warnings"] == ["empty_words"]
