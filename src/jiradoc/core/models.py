"""Document format tree: node and mark models for the tracker's rich-text fields"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- marks ---

class CodeMark(_Frozen):
    type: Literal["code"] = "code"


class StrongMark(_Frozen):
    type: Literal["strong"] = "strong"


class EmMark(_Frozen):
    type: Literal["em"] = "em"


class LinkAttrs(_Frozen):
    href: str
    title: Optional[str] = None


class LinkMark(_Frozen):
    """Hyperlink decoration; attached to a Text node by the caller."""
    type: Literal["link"] = "link"
    attrs: LinkAttrs


Mark = Annotated[Union[CodeMark, StrongMark, EmMark, LinkMark], Field(discriminator="type")]


# --- inline nodes ---

class Text(_Frozen):
    """The only leaf kind carrying literal character data."""
    type: Literal["text"] = "text"
    text: str
    marks: Optional[tuple[Mark, ...]] = None   # None -> omitted from the payload


class MentionAttrs(_Frozen):
    id: str
    text: str
    userType: str = "DEFAULT"


class Mention(_Frozen):
    type: Literal["mention"] = "mention"
    attrs: MentionAttrs


class HardBreak(_Frozen):
    type: Literal["hardBreak"] = "hardBreak"


Inline = Annotated[Union[Text, Mention, HardBreak], Field(discriminator="type")]


# --- block nodes ---

class Paragraph(_Frozen):
    type: Literal["paragraph"] = "paragraph"
    content: tuple[Inline, ...] = ()


class HeadingAttrs(_Frozen):
    level: int = Field(default=1, ge=1, le=6)


class Heading(_Frozen):
    type: Literal["heading"] = "heading"
    attrs: HeadingAttrs = HeadingAttrs()
    content: tuple[Inline, ...] = ()


class CodeBlockAttrs(_Frozen):
    language: str = "plain"


class CodeBlock(_Frozen):
    type: Literal["codeBlock"] = "codeBlock"
    attrs: CodeBlockAttrs = CodeBlockAttrs()
    content: tuple[Text, ...] = ()


class ListItem(_Frozen):
    type: Literal["listItem"] = "listItem"
    content: tuple["Block", ...] = ()


class BulletList(_Frozen):
    type: Literal["bulletList"] = "bulletList"
    content: tuple[ListItem, ...] = ()


class OrderedList(_Frozen):
    type: Literal["orderedList"] = "orderedList"
    content: tuple[ListItem, ...] = ()


Block = Annotated[
    Union[Paragraph, Heading, BulletList, OrderedList, CodeBlock],
    Field(discriminator="type"),
]

for _model in (ListItem, BulletList, OrderedList):
    _model.model_rebuild()


class Document(_Frozen):
    """Root container; content order is reading order."""
    version: Literal[1] = 1
    type: Literal["doc"] = "doc"
    content: tuple[Block, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """Return the wire dict sent verbatim as an issue description or comment body."""
        return self.model_dump(mode="json", exclude_none=True)
