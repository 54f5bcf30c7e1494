"""Line classifier: decide the role of one input line given the fence state"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


FENCE = "```"
DEFAULT_LANGUAGE = "plain"

HEADING_RE = re.compile(r'^(#{1,6})\s+(.+)$')
BULLET_RE = re.compile(r'^[*\-]\s+')
ORDERED_RE = re.compile(r'^[0-9]+\.\s+')


class LineKind(str, Enum):
    fence = "fence"         # toggles fenced code capture
    code = "code"           # raw line inside a fence
    blank = "blank"
    heading = "heading"
    bullet = "bullet"
    ordered = "ordered"
    text = "text"


@dataclass(frozen=True)
class Line:
    kind: LineKind
    text: str = ""                  # payload: heading text, list remainder, raw line
    level: Optional[int] = None     # heading level (1-6); None otherwise
    language: Optional[str] = None  # fence language tag; None otherwise


def classify(line: str, in_fence: bool = False) -> Line:
    """Return the role of line; inside a fence only a closing fence is special."""
    if line.startswith(FENCE):
        return Line(LineKind.fence, language=line[len(FENCE):].strip() or DEFAULT_LANGUAGE)
    if in_fence:
        return Line(LineKind.code, text=line)
    if not line.strip():
        return Line(LineKind.blank)

    if m := HEADING_RE.match(line):
        return Line(LineKind.heading, text=m.group(2), level=len(m.group(1)))
    if m := BULLET_RE.match(line):
        return Line(LineKind.bullet, text=line[m.end():])
    if m := ORDERED_RE.match(line):
        return Line(LineKind.ordered, text=line[m.end():])
    return Line(LineKind.text, text=line)
