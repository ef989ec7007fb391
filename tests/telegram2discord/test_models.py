"""Tests for telegram2discord/models.py."""

import pytest
from pydantic import ValidationError

from telegram2discord.models import ActorKind, Chat, ChatType, Message, User


class TestActorKind:
    def test_user(self):
        assert User(id=1, first_name="A").kind is ActorKind.USER

    def test_channel(self):
        assert Chat(id=1, type=ChatType.channel).kind is ActorKind.CHANNEL

    @pytest.mark.parametrize("chat_type", ["private", "group", "supergroup"])
    def test_other_chats(self, chat_type):
        assert Chat(id=1, type=chat_type).kind is ActorKind.CHAT


class TestMessageParsing:
    def test_bot_api_payload(self):
        message = Message.model_validate(
            {
                "message_id": 5,
                "from": {"id": 2, "is_bot": False, "first_name": "Bob"},
                "chat": {"id": -1, "type": "supergroup", "title": "G"},
                "text": "hi",
                "entities": [{"type": "bold", "offset": 0, "length": 2}],
                "reply_to_message": {
                    "message_id": 4,
                    "chat": {"id": -1, "type": "supergroup", "title": "G"},
                    "text": "yo",
                },
                "forward_from_chat": {"id": -9, "type": "channel", "title": "C"},
                "date": 1700000000,
            }
        )
        assert message.from_user.first_name == "Bob"
        assert message.entities[0].type == "bold"
        assert message.reply_to_message.text == "yo"
        assert message.is_reply()
        assert message.forward_source.title == "C"

    def test_forward_user_wins(self):
        user = User(id=1, first_name="U")
        chat = Chat(id=2, type=ChatType.channel, title="C")
        message = Message(
            chat=chat, forward_from=user, forward_from_chat=chat
        )
        assert message.forward_source is user

    def test_missing_chat_rejected(self):
        with pytest.raises(ValidationError):
            Message.model_validate({"text": "hi"})

    def test_unknown_chat_type_rejected(self):
        with pytest.raises(ValidationError):
            Chat.model_validate({"id": 1, "type": "forum"})

    def test_negative_offset_rejected(self):
        with pytest.raises(ValidationError):
            Message.model_validate(
                {
                    "chat": {"id": 1, "type": "group"},
                    "entities": [{"type": "bold", "offset": -1, "length": 2}],
                }
            )
