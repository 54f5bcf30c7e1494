"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_TEXT = """\
# Release notes

The build now uses `uv` and is **much** faster.
Second line of the same paragraph.

- first bullet
- second *bullet*
1. numbered step

```python
print("hello")
```

Closing remark."""


SAMPLE_ADF = {
    "version": 1,
    "type": "doc",
    "content": [
        {"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Summary"}]},
        {"type": "paragraph", "content": [
            {"type": "mention", "attrs": {"id": "acc-1", "text": "Ann", "userType": "DEFAULT"}},
            {"type": "text", "text": " please look at "},
            {"type": "text", "text": "main.py", "marks": [{"type": "code"}]},
        ]},
        {"type": "bulletList", "content": [
            {"type": "listItem", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "one"}]}]},
            {"type": "listItem", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "two"}]}]},
        ]},
        {"type": "panel", "attrs": {"panelType": "info"}, "content": [
            {"type": "paragraph", "content": [{"type": "text", "text": "Heads up"}]},
        ]},
    ],
}


@pytest.fixture(name="sample_text")
def sample_text_fixture():
    return SAMPLE_TEXT


@pytest.fixture(name="sample_adf")
def sample_adf_fixture():
    return SAMPLE_ADF
