"""Telegram message entities -> Discord Markdown.

Telegram reports entity offsets in UTF-16 code units; they are mapped to
Python string indices before slicing. Entities nest: a span's children are
rendered first and the parent's markup wraps the result.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from ..members import MemberLookup
from ..models import BridgeContext, MessageEntity
from .discord_markdown import (
    WRAP_DELIMITERS,
    discord_code_block,
    discord_link,
    discord_mention,
    discord_quote,
    discord_wrap,
)

QUOTE_TYPES = frozenset({"blockquote", "expandable_blockquote"})
# Left as plain text; Discord autolinks most of these itself
PASSTHROUGH_TYPES = frozenset(
    {
        "url",
        "email",
        "phone_number",
        "hashtag",
        "cashtag",
        "bot_command",
        "custom_emoji",
        "text_link",
    }
)


@dataclass(frozen=True, slots=True)
class _Span:
    start: int
    end: int
    entity: MessageEntity


def utf16_offset_to_index(text: str, offset: int) -> int:
    """Convert a UTF-16 code unit offset to a Python string index."""
    units = 0
    for index, char in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


def render_entities(
    text: str | None,
    entities: Sequence[MessageEntity],
    members: MemberLookup,
    bridge: BridgeContext | None = None,
) -> str:
    """Render Telegram text and its entities as Discord Markdown."""
    if not text:
        return ""
    if not entities:
        return text

    spans = sorted(
        (
            _Span(
                utf16_offset_to_index(text, e.offset),
                utf16_offset_to_index(text, e.offset + e.length),
                e,
            )
            for e in entities
        ),
        key=lambda s: (s.start, -s.end),
    )
    return _render(text, spans, 0, len(text), members, bridge)


def _render(
    text: str,
    spans: list[_Span],
    start: int,
    end: int,
    members: MemberLookup,
    bridge: BridgeContext | None,
) -> str:
    parts: list[str] = []
    pos = start
    i = 0
    while i < len(spans):
        span = spans[i]
        if span.start < pos:
            # Overlaps an already rendered sibling; clip it
            span = _Span(pos, max(pos, span.end), span.entity)
        if span.start >= span.end:
            i += 1
            continue
        j = i + 1
        children = []
        while j < len(spans) and spans[j].start < span.end:
            child = spans[j]
            children.append(_Span(child.start, min(child.end, span.end), child.entity))
            j += 1

        parts.append(text[pos : span.start])
        raw = text[span.start : span.end]
        inner = _render(text, children, span.start, span.end, members, bridge)
        parts.append(_apply(span.entity, inner, raw, members, bridge))
        pos = span.end
        i = j

    parts.append(text[pos:end])
    return "".join(parts)


def _apply(
    entity: MessageEntity,
    inner: str,
    raw: str,
    members: MemberLookup,
    bridge: BridgeContext | None,
) -> str:
    kind = entity.type
    if kind == "pre":
        return discord_code_block(raw, entity.language)
    if kind == "code":
        return discord_wrap(raw, WRAP_DELIMITERS["code"])
    if kind in WRAP_DELIMITERS:
        return discord_wrap(inner, WRAP_DELIMITERS[kind])
    if kind in QUOTE_TYPES:
        return discord_quote(inner)
    if kind == "text_link" and entity.url:
        return discord_link(inner, entity.url)
    if kind == "mention":
        member_id = members.find_member_id(raw.removeprefix("@"), bridge)
        return discord_mention(member_id) if member_id is not None else inner
    if kind == "text_mention":
        candidates = [raw]
        if entity.user is not None:
            candidates.append(entity.user.first_name)
        for name in candidates:
            member_id = members.find_member_id(name, bridge)
            if member_id is not None:
                return discord_mention(member_id)
        return inner
    if kind not in PASSTHROUGH_TYPES:
        logger.debug("ENTITIES: unhandled entity type={}", kind)
    return inner

