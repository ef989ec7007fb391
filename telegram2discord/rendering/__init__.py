"""Discord Markdown rendering for Telegram messages."""

from .discord_markdown import (
    compose,
    discord_bold,
    discord_mention,
    parse_header_name,
)
from .entities import render_entities, utf16_offset_to_index

__all__ = [
    "compose",
    "discord_bold",
    "discord_mention",
    "parse_header_name",
    "render_entities",
    "utf16_offset_to_index",
]
