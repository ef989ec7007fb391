"""Forward-chain annotation: "(forwarded by X)"."""

from .display_name import resolve_display_name
from .models import Message


def annotate_forward(
    message: Message, from_name: str, *, prefer_first_name: bool = False
) -> str:
    """Wrap from_name with the actor the message was forwarded from.

    The forwarded-from actor is its own display-name context, so a channel
    resolves to its title and a user to the user rule.
    """
    source = message.forward_source
    if source is None:
        return from_name
    forward_name = resolve_display_name(source, source, prefer_first_name)
    return f"{forward_name} (forwarded by {from_name})"
