# tests/test_io.py
"""
Loading word lists and comments from JSON, CSV and text files.
"""

from __future__ import annotations

import json

import pytest

from emotioncloud.core.io import load_comments, load_words, parse_comments, parse_words_json


def test_load_words_weight_and_size_keys(tmp_path) -> None:
    path = tmp_path / "words.json"
    path.write_text(json.dumps([
        {"text": "joy", "weight": 10, "color": "#f5a623"},
        {"text": "calm", "size": 5},
    ]), encoding="utf-8")
    words = load_words(path)
    assert [w.text for w in words] == ["joy", "calm"]
    assert [w.weight for w in words] == [10.0, 5.0]
    assert words[0].color == "#f5a623"
    assert words[1].color.startswith("#")


def test_load_words_relative_to_repo_root(tmp_path) -> None:
    (tmp_path / "words.json").write_text('{"words": [{"text": "hope", "weight": 1}]}', encoding="utf-8")
    words = load_words("words.json", repo_root=tmp_path)
    assert words[0].text == "hope"


def test_load_words_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "data",
    [
        "not json",
        '{"text": "joy"}',
        '[{"text": "", "weight": 1}]',
        '[{"text": "joy", "weight": "heavy"}]',
        '["joy"]',
        '[{"text": "joy", "weight": -3}]',
        '[{"text": "joy", "weight": 0}]',
        '[{"text": "joy", "weight": NaN}]',
        '[{"text": "joy", "weight": Infinity}]',
        '[{"text": "joy", "weight": true}]',
        '[{"text": "joy"}]',
    ],
)
def test_parse_words_json_invalid(data: str) -> None:
    with pytest.raises(ValueError):
        parse_words_json(data)


def test_load_comments_text(tmp_path) -> None:
    path = tmp_path / "comments.txt"
    path.write_text("first comment\n\n  second comment  \n", encoding="utf-8")
    assert load_comments(path) == ["first comment", "second comment"]


def test_load_comments_csv(tmp_path) -> None:
    path = tmp_path / "comments.csv"
    path.write_text("id,content\n1,hello there\n2,\n3,general kenobi\n", encoding="utf-8")
    assert load_comments(path) == ["hello there", "general kenobi"]


def test_load_comments_json(tmp_path) -> None:
    path = tmp_path / "comments.json"
    path.write_text(json.dumps(["plain", {"content": "object"}]), encoding="utf-8")
    assert load_comments(path) == ["plain", "object"]


def test_parse_comments_csv_without_content_column() -> None:
    with pytest.raises(ValueError):
        parse_comments("id,text\n1,hello\n", ".csv")


def test_parse_comments_json_bad_item() -> None:
    with pytest.raises(ValueError):
        parse_comments("[1, 2]", ".json")
