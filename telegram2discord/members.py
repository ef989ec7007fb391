"""Discord member lookup used to turn display names into mentions."""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from .models import BridgeContext


@dataclass(frozen=True, slots=True)
class Member:
    id: str
    display_name: str


class MemberLookup(Protocol):
    """Capability supplied by the Discord side of a bridge."""

    def find_member_id(
        self, display_name: str, bridge: BridgeContext | None = None
    ) -> str | None: ...


class MemberDirectory:
    """
    Pre-resolved display name -> member id map.

    Lookups are synchronous; refresh the directory from the Discord client
    before converting messages.
    """

    def __init__(self, members: Iterable[Member] = ()):
        self._by_name: dict[str, str] = self._index(members)

    @staticmethod
    def _index(members: Iterable[Member]) -> dict[str, str]:
        index: dict[str, str] = {}
        for member in members:
            # First member wins on duplicate display names
            index.setdefault(member.display_name, member.id)
        return index

    def find_member_id(
        self, display_name: str, bridge: BridgeContext | None = None
    ) -> str | None:
        return self._by_name.get(display_name)

    async def refresh(
        self, fetch_members: Callable[[], Awaitable[Iterable[Member]]]
    ) -> None:
        """Replace the directory contents with a fresh member listing."""
        members = await fetch_members()
        self._by_name = self._index(members)
        logger.debug("MEMBERS: refreshed count={}", len(self._by_name))
