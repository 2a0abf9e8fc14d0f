"""
Сервис group pings.
"""
import logging

from mxbot.config import Config
from mxbot.core.constants import ALIAS_PREFIX
from mxbot.core.types import UserId

logger = logging.getLogger(__name__)


class GroupPingService:
    """Собирает участников групп, упомянутых через %имя."""

    def __init__(self, config: Config):
        self.config = config

    def requested_groups(self, text: str) -> list[str]:
        """Известные группы из слов вида %имя, без повторов, в порядке упоминания."""
        groups: list[str] = []
        for word in text.split():
            if not word.startswith(ALIAS_PREFIX):
                continue
            name = word[len(ALIAS_PREFIX):].rstrip(".,!?:;")
            if name in self.config.group_pings and name not in groups:
                groups.append(name)
        return groups

    def members_to_ping(self, sender: str, text: str) -> list[UserId]:
        """
        Участники всех упомянутых групп, кроме самого отправителя.

        Пусто, если отправителю нельзя делать group ping.
        """
        groups = self.requested_groups(text)
        if not groups:
            return []
        if not self.config.can_ping(sender):
            logger.info(f"User {sender} is not allowed to ping groups {groups}")
            return []

        members: set[UserId] = set()
        for group in groups:
            members |= self.config.group_pings[group]
        members.discard(sender)
        return sorted(members)
