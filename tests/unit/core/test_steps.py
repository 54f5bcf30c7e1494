"""Unit tests for core/pipeline.py"""

import io
import json

import pytest

from jiradoc.core.pipeline import (
    load_adf,
    parse_mention,
    read_source,
    run_decode,
    run_encode,
    run_preview,
)


# --- read_source ---

def test_read_source_file(tmp_path):
    """read_source returns file text."""
    f = tmp_path / "body.txt"
    f.write_text("Hello", encoding="utf-8")
    assert read_source(str(f)) == "Hello"


def test_read_source_stdin(monkeypatch):
    """'-' reads from stdin."""
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert read_source("-") == "from stdin"


def test_read_source_missing_file(tmp_path):
    """A missing file raises ValueError naming the path."""
    with pytest.raises(ValueError, match="Failed to read"):
        read_source(str(tmp_path / "nope.txt"))


# --- parse_mention ---

@pytest.mark.parametrize("value,expected", [
    ("acc-1:Ann", ("acc-1", "Ann")),
    (" acc-1 : Ann Lee ", ("acc-1", "Ann Lee")),
    ("557058:abc:John", ("557058", "abc:John")),
])
def test_parse_mention(value, expected):
    """Option values split on the first colon."""
    assert parse_mention(value) == expected


@pytest.mark.parametrize("value", ["no-colon", ":Ann", "acc-1:", "  :  "])
def test_parse_mention_invalid(value):
    """Values missing either part are rejected."""
    with pytest.raises(ValueError, match="Invalid mention"):
        parse_mention(value)


# --- load_adf ---

def test_load_adf_invalid_json():
    """Malformed JSON raises ValueError."""
    with pytest.raises(ValueError, match="Invalid document JSON"):
        load_adf("{not json")


def test_load_adf_blank_is_none():
    """Blank input decodes to None."""
    assert load_adf("  \n") is None


# --- run_* ---

def test_run_encode(tmp_path):
    """run_encode converts file text into a Document."""
    f = tmp_path / "body.txt"
    f.write_text("# Title\nBody", encoding="utf-8")
    doc = run_encode(str(f))
    assert [b.type for b in doc.content] == ["heading", "paragraph"]


def test_run_encode_with_mentions(tmp_path):
    """Mention option values are prepended as mention nodes."""
    f = tmp_path / "body.txt"
    f.write_text("take a look", encoding="utf-8")
    doc = run_encode(str(f), ["acc-1:Ann"])
    first = doc.to_payload()["content"][0]["content"][0]
    assert first == {"type": "mention", "attrs": {"id": "acc-1", "text": "Ann", "userType": "DEFAULT"}}


def test_run_decode(tmp_path):
    """run_decode renders a JSON tree file as text."""
    f = tmp_path / "body.json"
    f.write_text(json.dumps({"type": "doc", "version": 1, "content": [
        {"type": "paragraph", "content": [{"type": "text", "text": "hi"}]},
    ]}), encoding="utf-8")
    assert run_decode(str(f)) == "hi"


def test_run_decode_plain_string_field(tmp_path):
    """A JSON string field value is displayed as is."""
    f = tmp_path / "body.json"
    f.write_text('"legacy plain description"', encoding="utf-8")
    assert run_decode(str(f)) == "legacy plain description"


def test_run_preview(tmp_path):
    """run_preview returns the document and its rendered text."""
    f = tmp_path / "body.txt"
    f.write_text("one\n\n- two", encoding="utf-8")
    doc, text = run_preview(str(f), ["acc-1:Ann"])
    assert doc.content[0].type == "paragraph"
    assert text == "@Ann one\n• two"
