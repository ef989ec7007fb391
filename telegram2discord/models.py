"""Telegram-side message models and conversion result types."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Actors
# =============================================================================


class ChatType(StrEnum):
    private = "private"
    group = "group"
    supergroup = "supergroup"
    channel = "channel"


class ActorKind(StrEnum):
    """Discriminant used to pick a display-name rule."""

    USER = "user"
    CHAT = "chat"
    CHANNEL = "channel"


class User(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: str | None = None
    username: str | None = None

    @property
    def kind(self) -> ActorKind:
        return ActorKind.USER


class Chat(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    type: ChatType
    title: str | None = None
    username: str | None = None
    first_name: str | None = None

    @property
    def kind(self) -> ActorKind:
        if self.type == ChatType.channel:
            return ActorKind.CHANNEL
        return ActorKind.CHAT


Actor = User | Chat

# =============================================================================
# Messages
# =============================================================================


class MessageEntity(BaseModel):
    """A formatting span. Offsets and lengths are in UTF-16 code units."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    url: str | None = None
    user: User | None = None
    language: str | None = None


class Message(BaseModel):
    """
    Inbound Telegram message (Bot API shape).

    ``from`` is a Python keyword, so the sender lives in ``from_user``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    message_id: int = 0
    chat: Chat
    from_user: User | None = Field(default=None, alias="from")
    text: str | None = None
    entities: tuple[MessageEntity, ...] = ()
    reply_to_message: "Message | None" = None
    forward_from: User | None = None
    forward_from_chat: Chat | None = None

    @property
    def forward_source(self) -> Actor | None:
        """Actor this message was forwarded from; a user wins over a chat."""
        return self.forward_from or self.forward_from_chat

    def is_reply(self) -> bool:
        return self.reply_to_message is not None


# =============================================================================
# Bridge side
# =============================================================================


class BotIdentity(BaseModel):
    """The bridge bot's own Telegram user."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str | None = None


class BridgeContext(BaseModel):
    """The Telegram chat / Discord channel pairing a message is crossing."""

    model_config = ConfigDict(frozen=True)

    name: str
    telegram_chat_id: int
    discord_channel_id: str


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    Outcome of converting one Telegram message.

    ``composed`` is the flattened wire text; ``from_name`` and ``body`` are the
    structured parts it was built from.
    """

    from_name: str
    body: str
    composed: str

    def as_dict(self) -> dict[str, Any]:
        return {"from": self.from_name, "composed": self.composed}
