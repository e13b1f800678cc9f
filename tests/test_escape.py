from __future__ import annotations

import html
import json

import pytest

from foliogen.escape import escape_attribute, escape_text, to_script_json


def test_escape_attribute_example() -> None:
    assert escape_attribute('Rock & "Roll" <tag>') == "Rock &amp; &quot;Roll&quot; &lt;tag&gt;"


def test_escape_text_leaves_quotes_alone() -> None:
    assert escape_text('say "hi" & <b>') == 'say "hi" &amp; &lt;b&gt;'


def test_escape_text_escapes_ampersand_first() -> None:
    assert escape_text("<&>") == "&lt;&amp;&gt;"


def test_escape_is_not_idempotent() -> None:
    once = escape_text("a & b")

    assert escape_text(once) == "a &amp;amp; b"


def test_escape_handles_empty_and_none() -> None:
    assert escape_text("") == ""
    assert escape_attribute(None) == ""  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "raw",
    [
        "plain",
        "a < b > c",
        "&&&",
        '"quoted"',
        '<a href="x">&amp;</a>',
        "mixed & \"all\" <four>",
    ],
)
def test_escape_attribute_round_trips_through_unescape(raw: str) -> None:
    escaped = escape_attribute(raw)

    assert '"' not in escaped
    assert "<" not in escaped and ">" not in escaped
    assert html.unescape(escaped) == raw


def test_only_entity_ampersands_survive() -> None:
    escaped = escape_text("a&b<c>d")

    stripped = escaped.replace("&amp;", "").replace("&lt;", "").replace("&gt;", "")
    assert "&" not in stripped


def test_script_json_cannot_close_the_script_element() -> None:
    payload = [{"label": "</script><script>alert(1)</script>", "note": "a & b"}]

    encoded = to_script_json(payload)

    assert "<" not in encoded
    assert ">" not in encoded
    assert "&" not in encoded
    assert json.loads(encoded) == payload


def test_script_json_escapes_backslashes_and_control_characters() -> None:
    payload = {"path": "C:\\media\\clip.mp4", "text": "line1\nline2\t\x07"}

    encoded = to_script_json(payload)

    assert "\n" not in encoded
    assert json.loads(encoded) == payload


def test_script_json_keeps_non_ascii_readable() -> None:
    assert to_script_json(["ロボット"]) == '["ロボット"]'
