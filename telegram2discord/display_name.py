"""Display-name resolution for Telegram actors."""

from .models import Actor, ActorKind, Chat, User


def resolve_display_name(
    actor: Actor | None, chat: Actor, prefer_first_name: bool
) -> str:
    """
    Decide how to label an actor.

    Args:
        actor: The user (or chat) to label; None for anonymous posts
        chat: The context the actor appears in
        prefer_first_name: Use the first name even when a username exists

    Returns:
        The channel title when the context is a channel, otherwise the
        user's username or first name. Never empty.
    """
    if chat.kind is ActorKind.CHANNEL:
        return _chat_name(chat)
    if actor is None:
        # Anonymous sender: label the context instead
        return resolve_display_name(chat, chat, prefer_first_name)
    if actor.kind is ActorKind.USER:
        return _user_name(actor, prefer_first_name)
    return _chat_name(actor)


def _user_name(user: User, prefer_first_name: bool) -> str:
    name = user.username
    if not name or prefer_first_name:
        name = user.first_name
    return name or str(user.id)


def _chat_name(chat: Chat) -> str:
    return chat.title or chat.username or chat.first_name or str(chat.id)
