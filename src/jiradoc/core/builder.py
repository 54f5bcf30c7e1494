"""Document builder: sequence classified lines into the document's block content"""

import logging
from typing import Optional

from jiradoc.core.inline import format_inline
from jiradoc.core.lines import LineKind, classify
from jiradoc.core.models import (
    Block,
    BulletList,
    CodeBlock,
    CodeBlockAttrs,
    Document,
    Heading,
    HeadingAttrs,
    Inline,
    ListItem,
    OrderedList,
    Paragraph,
    Text,
)


log = logging.getLogger(__name__)

LINE_BREAK = "\n"


def _is_break(node: Inline) -> bool:
    return isinstance(node, Text) and node.text == LINE_BREAK and not node.marks


class DocumentBuilder:
    """Accumulates blocks for one encode call.

    At most one paragraph is open at a time; flush() closes it. Code fences
    are captured raw between open_fence() and close_fence().
    """

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.paragraph: Optional[list[Inline]] = None
        self.code_lines: Optional[list[str]] = None
        self.language: Optional[str] = None

    @property
    def in_fence(self) -> bool:
        return self.code_lines is not None

    def flush(self) -> None:
        """Close the open paragraph, dropping a trailing synthetic line break."""
        if self.paragraph is None:
            return
        if self.paragraph and _is_break(self.paragraph[-1]):
            self.paragraph.pop()
        self.blocks.append(Paragraph(content=self.paragraph))
        self.paragraph = None

    def append_inline(self, nodes: list[Inline], line_break: bool) -> None:
        """Add one ordinary line to the open paragraph, opening one if needed."""
        if self.paragraph is None:
            self.paragraph = []
        self.paragraph.extend(nodes)
        if line_break:
            self.paragraph.append(Text(text=LINE_BREAK))

    def add_block(self, block: Block) -> None:
        """Emit a standalone block after closing the open paragraph."""
        self.flush()
        self.blocks.append(block)

    def open_fence(self, language: str) -> None:
        self.flush()
        self.code_lines = []
        self.language = language

    def capture(self, line: str) -> None:
        self.code_lines.append(line)

    def close_fence(self) -> None:
        content = [Text(text="\n".join(self.code_lines))] if self.code_lines else []
        self.blocks.append(CodeBlock(attrs=CodeBlockAttrs(language=self.language), content=content))
        self.code_lines = None
        self.language = None

    def build(self) -> Document:
        """Finish the input: emit an unterminated fence if it captured anything, then flush."""
        if self.in_fence:
            log.debug("unterminated code fence (%d buffered lines)", len(self.code_lines))
            if self.code_lines:
                self.close_fence()
            else:
                self.code_lines = None
        self.flush()
        return Document(content=self.blocks or [Paragraph()])


def _list_item(text: str) -> ListItem:
    return ListItem(content=[Paragraph(content=format_inline(text))])


def text_to_adf(text: Optional[str]) -> Document:
    """Convert plain/lightweight-markup text into a document tree. Never raises."""
    if not text:
        return Document(content=[])

    lines = text.split("\n")
    builder = DocumentBuilder()

    for i, raw in enumerate(lines):
        line = classify(raw, builder.in_fence)

        if line.kind is LineKind.fence:
            if builder.in_fence:
                builder.close_fence()
            else:
                builder.open_fence(line.language)
        elif line.kind is LineKind.code:
            builder.capture(line.text)
        elif line.kind is LineKind.blank:
            builder.flush()
        elif line.kind is LineKind.heading:
            builder.add_block(Heading(
                attrs=HeadingAttrs(level=line.level),
                content=[Text(text=line.text)],
            ))
        elif line.kind is LineKind.bullet:
            # One single-item list per line; consecutive items are not grouped.
            builder.add_block(BulletList(content=[_list_item(line.text)]))
        elif line.kind is LineKind.ordered:
            builder.add_block(OrderedList(content=[_list_item(line.text)]))
        else:
            builder.append_inline(format_inline(line.text), line_break=i < len(lines) - 1)

    doc = builder.build()
    log.debug("encoded %d line(s) into %d block(s)", len(lines), len(doc.content))
    return doc
