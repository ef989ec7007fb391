"""Reply-chain annotation: "(in reply to X)" and the quoted excerpt.

Only one level of ``reply_to_message`` is inspected.
"""

from typing import NamedTuple

from loguru import logger

from config.quote import QuoteSettings

from .display_name import resolve_display_name
from .members import MemberLookup
from .models import BotIdentity, BridgeContext, Message
from .rendering.discord_markdown import discord_mention, parse_header_name


class ReplyAnnotation(NamedTuple):
    from_name: str
    text: str


def is_self_reply(reply: Message, bot: BotIdentity) -> bool:
    """True if the replied-to message was posted by the bridge bot itself."""
    return reply.from_user is not None and reply.from_user.id == bot.id


def split_header(text: str) -> tuple[str, str]:
    """Split relayed text into (header name, body)."""
    header, _, body = text.partition("\n")
    return parse_header_name(header), body


def truncate_length(text: str, max_chars: int, ellipsis: str) -> str:
    """Length cap: cut at max_chars and mark the cut."""
    if len(text) > max_chars:
        return text[:max_chars] + ellipsis
    return text


def truncate_lines(text: str, max_lines: int, ellipsis: str) -> str:
    """Line cap: keep at most max_lines lines, cutting at the next newline."""
    newlines = [i for i, c in enumerate(text) if c == "\n"]
    if len(newlines) >= max_lines:
        return text[: newlines[max_lines - 1]] + ellipsis
    return text


def quote_excerpt(text: str, quote: QuoteSettings) -> str:
    """Apply both caps (length first, then lines) and quote-indent the result."""
    excerpt = truncate_length(text, quote.max_chars, quote.ellipsis)
    excerpt = truncate_lines(excerpt, quote.max_lines, quote.ellipsis)
    return quote.prefix + excerpt.replace("\n", "\n" + quote.prefix)


def annotate_reply(
    message: Message,
    from_name: str,
    bot: BotIdentity,
    members: MemberLookup,
    base_text: str,
    *,
    prefer_first_name: bool = False,
    quote: QuoteSettings | None = None,
    bridge: BridgeContext | None = None,
) -> ReplyAnnotation:
    """
    Annotate a reply with its target and a short quote of the target text.

    Args:
        message: The message being converted
        from_name: Sender label computed so far
        bot: The bridge bot, to detect replies to relayed Discord messages
        members: Discord member lookup for those replies
        base_text: Rendered body of the message
        prefer_first_name: Display-name preference
        quote: Excerpt limits; defaults to QuoteSettings()

    Returns:
        ReplyAnnotation with the updated sender label and body
    """
    reply = message.reply_to_message
    if reply is None:
        return ReplyAnnotation(from_name, base_text)
    quote = quote or QuoteSettings()

    in_reply_to = resolve_display_name(reply.from_user, message.chat, prefer_first_name)

    quoted_text = reply.text
    if quoted_text is not None and is_self_reply(reply, bot):
        # Relayed text starts with the Discord author's "**Name**" header
        dc_name, quoted_text = split_header(quoted_text)
        member_id = members.find_member_id(dc_name, bridge)
        in_reply_to = discord_mention(member_id) if member_id is not None else dc_name
        logger.debug("REPLY: self-reply name={!r} member_id={}", dc_name, member_id)

    text = base_text
    if quoted_text is not None:
        text = quote_excerpt(quoted_text, quote) + "\n" + base_text

    return ReplyAnnotation(f"{from_name} (in reply to {in_reply_to})", text)
