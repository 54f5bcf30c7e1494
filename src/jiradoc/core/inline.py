"""Inline formatter: one line of text -> Text nodes carrying code/strong/em marks

Single left-to-right pass, no backtracking. Code spans are located first and
their content is never scanned for emphasis. Between code spans, ``**x**`` is
tried before ``*x*`` at every position; matched spans are not recursed into,
so nested emphasis is not supported. Delimiters without a partner stay
literal characters.
"""

from enum import Enum
from typing import Callable, Optional

from jiradoc.core.models import CodeMark, EmMark, StrongMark, Text


class Mode(str, Enum):
    plain = "plain"
    code = "code"
    strong = "strong"
    em = "em"


# (mode, inner_start, inner_end, resume_at)
Span = tuple[Mode, int, int, int]
Matcher = Callable[[str, int], Optional[Span]]


def _code_span(text: str, i: int) -> Optional[Span]:
    """Match `...` at i; the inner text must be non-empty."""
    if text[i] != "`":
        return None
    end = text.find("`", i + 1)
    if end > i + 1:
        return Mode.code, i + 1, end, end + 1
    return None


def _emphasis_span(text: str, i: int) -> Optional[Span]:
    """Match **...** (preferred) or *...* at i; inner text holds no '*'."""
    if text.startswith("**", i):
        end = text.find("*", i + 2)
        if end > i + 2 and text.startswith("**", end):
            return Mode.strong, i + 2, end, end + 2
    if text[i] == "*":
        end = text.find("*", i + 1)
        if end > i + 1:
            return Mode.em, i + 1, end, end + 1
    return None


def _scan(text: str, match: Matcher) -> list[tuple[Mode, str]]:
    """Split text into (mode, chunk) segments in order; plain chunks are never empty."""
    segments: list[tuple[Mode, str]] = []
    plain_start = i = 0

    while i < len(text):
        span = match(text, i)
        if span is None:
            i += 1
            continue
        mode, start, end, resume = span
        if i > plain_start:
            segments.append((Mode.plain, text[plain_start:i]))
        segments.append((mode, text[start:end]))
        i = plain_start = resume

    if plain_start < len(text):
        segments.append((Mode.plain, text[plain_start:]))
    return segments


def _text_node(mode: Mode, chunk: str) -> Text:
    if mode is Mode.code:
        return Text(text=chunk, marks=[CodeMark()])
    if mode is Mode.strong:
        return Text(text=chunk, marks=[StrongMark()])
    if mode is Mode.em:
        return Text(text=chunk, marks=[EmMark()])
    return Text(text=chunk)


def format_inline(line: str) -> list[Text]:
    """Tokenize one line into Text nodes; unmarked input becomes a single plain node."""
    nodes: list[Text] = []
    for mode, chunk in _scan(line, _code_span):
        if mode is Mode.code:
            nodes.append(_text_node(mode, chunk))
        else:
            nodes.extend(_text_node(m, c) for m, c in _scan(chunk, _emphasis_span))
    return nodes or [Text(text=line)]
