"""
Разворачивание group pings.

Участник группы - либо пользователь (@user:server), либо ссылка на другую
группу (%имя). Ссылка разворачивается на один уровень: берутся только
пользователи из исходного списка указанной группы, её собственные ссылки
не раскрываются.
"""
import logging
from types import MappingProxyType
from typing import Mapping, Optional

from mxbot.core.constants import ALIAS_PREFIX, USER_PREFIX
from mxbot.core.types import UserId
from mxbot.domain import ConfigParseError, is_valid_user_id

logger = logging.getLogger(__name__)

GroupPings = Mapping[str, frozenset[UserId]]


def _parse_user(token: str, group: str) -> UserId:
    if not is_valid_user_id(token):
        raise ConfigParseError(f"Group ping {group!r} has invalid user id {token!r}")
    return UserId(token)


def _literal_users(tokens: list[str], group: str) -> set[UserId]:
    return {_parse_user(t, group) for t in tokens if t.startswith(USER_PREFIX)}


def resolve_group_pings(
    raw_groups: Optional[Mapping[str, list[str]]],
) -> tuple[GroupPings, frozenset[UserId]]:
    """
    Возвращает (группа -> участники, кто может делать group ping).

    Право пинговать есть у всех пользователей, явно перечисленных
    хотя бы в одной группе.
    """
    if raw_groups is None:
        logger.info("No group pings defined. Disabling feature...")
        return MappingProxyType({}), frozenset()

    ping_users: set[UserId] = set()
    for group, tokens in raw_groups.items():
        ping_users |= _literal_users(tokens, group)

    expanded: dict[str, frozenset[UserId]] = {}
    for group, tokens in raw_groups.items():
        members: set[UserId] = set()
        for token in tokens:
            if token.startswith(ALIAS_PREFIX):
                alias = token[len(ALIAS_PREFIX):]
                target = raw_groups.get(alias)
                if target is None:
                    logger.warning(f"⚠️ Group alias %{alias} has no corresponding group. Ignoring...")
                    continue
                members |= _literal_users(target, alias)
            else:
                members.add(_parse_user(token, group))
        expanded[group] = frozenset(members)

    logger.info(f"✅ Loaded {len(expanded)} group pings")
    return MappingProxyType(expanded), frozenset(ping_users)
