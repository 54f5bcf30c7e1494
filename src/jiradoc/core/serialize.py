"""Serializer: render a document tree (model or raw API mapping) back to plain text"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


BULLET = "• "
FENCE = "```"

_MARK_DELIMITERS = {"code": "`", "strong": "**", "em": "*"}


def _as_mapping(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value


def _children(node: Mapping) -> list:
    content = node.get("content")
    return content if isinstance(content, (list, tuple)) else []


def _attrs(node: Mapping) -> Mapping:
    attrs = node.get("attrs")
    return attrs if isinstance(attrs, Mapping) else {}


def _apply_marks(text: str, marks: Any) -> str:
    """Wrap text once per mark, in stored order; unknown marks (e.g. link) are ignored."""
    if not isinstance(marks, (list, tuple)):
        return text
    for mark in marks:
        kind = mark.get("type") if isinstance(mark, Mapping) else None
        delim = _MARK_DELIMITERS.get(kind)
        if delim:
            text = f"{delim}{text}{delim}"
    return text


def _list_to_text(node: Mapping) -> str:
    lines = []
    for item in _children(node):
        item = _as_mapping(item)
        if isinstance(item, Mapping):
            lines.append(BULLET + nodes_to_text(_children(item)).strip() + "\n")
    return "".join(lines)


def node_to_text(node: Any) -> str:
    """Render a single node; unknown kinds are transparent containers."""
    node = _as_mapping(node)
    if not isinstance(node, Mapping):
        return ""

    kind = node.get("type")
    children = _children(node)

    if kind == "paragraph":
        return nodes_to_text(children) + "\n"
    if kind == "heading":
        if not children:
            return "\n"
        level = _attrs(node).get("level")
        if not isinstance(level, int) or level < 1:
            level = 1
        level = min(level, 6)
        return "#" * level + " " + nodes_to_text(children) + "\n"
    if kind in ("bulletList", "orderedList"):
        # Ordered lists share the bullet glyph and are not renumbered.
        return _list_to_text(node)
    if kind == "codeBlock":
        language = _attrs(node).get("language")
        language = "" if language is None else str(language)
        return f"{FENCE}{language}\n{nodes_to_text(children)}\n{FENCE}\n"
    if kind == "text":
        text = node.get("text")
        return _apply_marks("" if text is None else str(text), node.get("marks"))
    if kind == "mention":
        attrs = _attrs(node)
        return "@" + str(attrs.get("text") or attrs.get("id") or "user")
    if kind == "hardBreak":
        return "\n"
    return nodes_to_text(children)


def nodes_to_text(nodes: Any) -> str:
    """Render a sequence of nodes depth-first; None and non-sequences render as ''."""
    if not isinstance(nodes, (list, tuple)):
        return ""
    return "".join(node_to_text(n) for n in nodes)


def adf_to_text(adf: Any) -> str:
    """Render a whole document for display.

    Adjacent top-level paragraphs are separated by a blank line, mirroring
    how the encoder splits paragraphs, and trailing newlines are dropped.
    Returns '' for None or a tree without content.
    """
    adf = _as_mapping(adf)
    if not isinstance(adf, Mapping):
        return ""

    parts: list[str] = []
    previous = None
    for node in _children(adf):
        node = _as_mapping(node)
        if not isinstance(node, Mapping):
            continue
        kind = node.get("type")
        if kind == "paragraph" and previous == "paragraph":
            parts.append("\n")
        parts.append(node_to_text(node))
        previous = kind
    return "".join(parts).rstrip("\n")


def format_description(value: Any) -> str:
    """Display text for an issue field that may hold a plain string or a document tree."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return adf_to_text(value)
