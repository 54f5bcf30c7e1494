"""Standalone node and mark constructors used outside the parse path"""

from typing import Iterable, Optional

from jiradoc.core.models import (
    Document,
    Inline,
    LinkAttrs,
    LinkMark,
    Mention,
    MentionAttrs,
    Paragraph,
    Text,
)


def create_mention(account_id: str, display_name: str) -> Mention:
    """Return a mention node for a user account."""
    return Mention(attrs=MentionAttrs(id=account_id, text=display_name, userType="DEFAULT"))


def create_link(href: str, title: Optional[str] = None) -> LinkMark:
    """Return a link mark; the caller attaches it to a Text node's marks."""
    return LinkMark(attrs=LinkAttrs(href=href, title=title))


def prepend_mentions(document: Document, mentions: Iterable[tuple[str, str]]) -> Document:
    """Return a copy of document whose first paragraph opens with the given mentions.

    mentions are (account_id, display_name) pairs; each mention node is
    followed by a single space. A leading paragraph is inserted when the
    document does not start with one.
    """
    lead: list[Inline] = []
    for account_id, display_name in mentions:
        lead += [create_mention(account_id, display_name), Text(text=" ")]
    if not lead:
        return document

    content = list(document.content)
    if content and isinstance(content[0], Paragraph) and content[0].content:
        content[0] = Paragraph(content=lead + list(content[0].content))
    elif content and isinstance(content[0], Paragraph):
        content[0] = Paragraph(content=lead[:-1])
    else:
        content.insert(0, Paragraph(content=lead[:-1]))
    return Document(content=content)
