"""Telegram -> Discord message translation."""

from .converter import convert
from .display_name import resolve_display_name
from .forward import annotate_forward
from .members import Member, MemberDirectory, MemberLookup
from .models import (
    ActorKind,
    BotIdentity,
    BridgeContext,
    Chat,
    ChatType,
    ConversionResult,
    Message,
    MessageEntity,
    User,
)
from .reply import ReplyAnnotation, annotate_reply

__all__ = [
    "ActorKind",
    "BotIdentity",
    "BridgeContext",
    "Chat",
    "ChatType",
    "ConversionResult",
    "Member",
    "MemberDirectory",
    "MemberLookup",
    "Message",
    "MessageEntity",
    "ReplyAnnotation",
    "User",
    "annotate_forward",
    "annotate_reply",
    "convert",
    "resolve_display_name",
]
