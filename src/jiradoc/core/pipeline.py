"""Pipeline step functions: read input, encode, decode, and preview orchestration"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable

from jiradoc.core.builder import text_to_adf
from jiradoc.core.models import Document
from jiradoc.core.nodes import prepend_mentions
from jiradoc.core.serialize import adf_to_text, format_description


log = logging.getLogger(__name__)

STDIN = "-"


def read_source(path: str) -> str:
    """Return the text of path, or of stdin when path is '-'."""
    if path == STDIN:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Failed to read {path}: {e}") from e


def parse_mention(value: str) -> tuple[str, str]:
    """Split an 'ACCOUNT_ID:Display Name' option value into its two parts."""
    account_id, sep, display_name = value.partition(":")
    if not sep or not account_id.strip() or not display_name.strip():
        raise ValueError(f"Invalid mention '{value}': expected ACCOUNT_ID:Display Name")
    return account_id.strip(), display_name.strip()


def load_adf(raw: str) -> Any:
    """Decode a JSON document tree (or a bare JSON string field value)."""
    try:
        return json.loads(raw) if raw.strip() else None
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid document JSON: {e}") from e


def run_encode(path: str, mentions: Iterable[str] = ()) -> Document:
    """Read text from path and convert it to a document, prepending any mentions."""
    text = read_source(path)
    doc = text_to_adf(text)
    pairs = [parse_mention(m) for m in mentions]
    if pairs:
        log.info("prepending %d mention(s)", len(pairs))
        doc = prepend_mentions(doc, pairs)
    return doc


def run_decode(path: str) -> str:
    """Read a JSON document tree from path and render it as text."""
    return format_description(load_adf(read_source(path)))


def run_preview(path: str, mentions: Iterable[str] = ()) -> tuple[Document, str]:
    """Encode then render path. Returns (document, text a reader will see once posted)."""
    doc = run_encode(path, mentions)
    return doc, adf_to_text(doc)
