"""Unit tests for core/models.py"""

import pytest
from pydantic import ValidationError

from jiradoc.core.builder import text_to_adf
from jiradoc.core.models import Document, Heading, HeadingAttrs, Paragraph, Text


def test_document_defaults():
    """A bare Document carries the fixed version and root kind."""
    assert Document().to_payload() == {"version": 1, "type": "doc", "content": []}


def test_documents_are_frozen():
    """Trees are immutable values."""
    doc = text_to_adf("Hello")
    with pytest.raises(ValidationError):
        doc.version = 2
    with pytest.raises(ValidationError):
        doc.content[0].content[0].text = "changed"


def test_content_sequences_are_immutable():
    """Child sequences are tuples, so trees cannot be grown in place."""
    doc = text_to_adf("**Hello** world")
    assert isinstance(doc.content, tuple)
    assert isinstance(doc.content[0].content, tuple)
    assert isinstance(doc.content[0].content[0].marks, tuple)
    with pytest.raises(AttributeError):
        doc.content.append(doc.content[0])


def test_payload_uses_lists():
    """The wire payload carries JSON arrays, not tuples."""
    payload = text_to_adf("**Hello**").to_payload()
    assert isinstance(payload["content"], list)
    assert isinstance(payload["content"][0]["content"], list)
    assert payload["content"][0]["content"][0]["marks"] == [{"type": "strong"}]


@pytest.mark.parametrize("level", [0, 7])
def test_heading_level_bounds(level):
    """Heading levels outside 1-6 are rejected."""
    with pytest.raises(ValidationError):
        HeadingAttrs(level=level)


def test_payload_omits_absent_marks():
    """Unmarked text nodes carry no 'marks' member on the wire."""
    payload = Paragraph(content=[Text(text="a")]).model_dump(mode="json", exclude_none=True)
    assert payload == {"type": "paragraph", "content": [{"type": "text", "text": "a"}]}


def test_heading_payload_shape():
    """Heading payload carries attrs.level and its text content."""
    heading = Heading(attrs=HeadingAttrs(level=2), content=[Text(text="T")])
    assert heading.model_dump(mode="json", exclude_none=True) == {
        "type": "heading",
        "attrs": {"level": 2},
        "content": [{"type": "text", "text": "T"}],
    }


def test_payload_validates_back_into_models(sample_text):
    """An encoded payload parses back into an equal Document."""
    doc = text_to_adf(sample_text)
    assert Document.model_validate(doc.to_payload()) == doc


def test_unknown_kind_rejected_by_model():
    """The typed model only admits known block kinds."""
    with pytest.raises(ValidationError):
        Document.model_validate({"version": 1, "type": "doc", "content": [{"type": "panel"}]})
