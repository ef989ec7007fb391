"""Telegram -> Discord message conversion.

Turns one Telegram message into the sender label and the composed Discord
text ``**name**\\nbody``. Pure: no I/O besides logging.
"""

from collections.abc import Callable, Sequence

from loguru import logger

from config.settings import Settings

from .display_name import resolve_display_name
from .forward import annotate_forward
from .members import MemberLookup
from .models import BotIdentity, BridgeContext, ConversionResult, Message, MessageEntity
from .rendering.discord_markdown import compose
from .rendering.entities import render_entities
from .reply import annotate_reply

TextRenderer = Callable[
    [str | None, Sequence[MessageEntity], MemberLookup, BridgeContext | None], str
]


def convert(
    message: Message,
    bot: BotIdentity,
    settings: Settings,
    members: MemberLookup,
    bridge: BridgeContext | None = None,
    *,
    render_text: TextRenderer = render_entities,
) -> ConversionResult:
    """
    Convert a Telegram message to its Discord form.

    Args:
        message: The Telegram message
        bot: The bridge bot's Telegram identity
        settings: Bridge settings
        members: Discord member lookup for mentions
        bridge: The bridge the message is crossing
        render_text: Entity renderer; defaults to render_entities

    Returns:
        ConversionResult with the sender label and composed text
    """
    prefer_first_name = settings.use_first_name_instead_of_username

    with logger.contextualize(
        bridge=bridge.name if bridge else None,
        chat_id=message.chat.id,
        message_id=message.message_id,
    ):
        text = render_text(message.text, message.entities, members, bridge)
        from_name = resolve_display_name(
            message.from_user, message.chat, prefer_first_name
        )

        if message.reply_to_message is not None:
            from_name, text = annotate_reply(
                message,
                from_name,
                bot,
                members,
                text,
                prefer_first_name=prefer_first_name,
                quote=settings.quote,
                bridge=bridge,
            )

        if message.forward_source is not None:
            from_name = annotate_forward(
                message, from_name, prefer_first_name=prefer_first_name
            )

        logger.debug(
            "CONVERT: from={!r} reply={} forward={}",
            from_name,
            message.is_reply(),
            message.forward_source is not None,
        )

    return ConversionResult(
        from_name=from_name, body=text, composed=compose(from_name, text)
    )
