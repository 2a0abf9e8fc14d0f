"""
Разбор опциональных функций бота.

Каждая функция либо полностью включена (все поля на месте и согласованы),
либо полностью выключена (пустые значения). Несогласованный конфиг -
исключение с кодом выхода, отсутствующая секция - запись в лог и пустые значения.
"""
import logging
from types import MappingProxyType
from typing import Mapping

from yarl import URL

from mxbot.core.types import RoomId, UserId
from mxbot.domain import (
    AdminConfigError,
    CaseInsensitive,
    CaseSensitive,
    ConfigParseError,
    CorrectionConfigError,
    LinkConfigError,
    SearchConfigError,
    SpellCheckRule,
)

from .raw import RawConfig

logger = logging.getLogger(__name__)


def parse_url(value: str, what: str) -> URL:
    """Парсит абсолютный http(s) URL или бросает ConfigParseError."""
    try:
        url = URL(value)
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"Invalid {what} {value!r}: {e}") from e
    if not url.is_absolute() or url.scheme not in ("http", "https") or not url.host:
        raise ConfigParseError(f"Invalid {what} {value!r}: expected an absolute http(s) URL")
    return url


def resolve_search(raw: RawConfig) -> tuple[Mapping[str, str], str]:
    """Возвращает (короткое имя -> org/repo, токен GitHub)."""
    if raw.searchable_repos is None:
        logger.info("No searchable repos found. Disabling feature...")
        return MappingProxyType({}), ""

    if raw.github_authentication is None:
        raise SearchConfigError()

    repos = {name.lower(): repo for name, repo in raw.searchable_repos.items()}
    return MappingProxyType(repos), raw.github_authentication.access_token


def resolve_links(raw: RawConfig) -> tuple[frozenset[str], Mapping[str, URL]]:
    """Возвращает (слова-триггеры, ключ -> URL)."""
    if raw.linkable_urls is None:
        logger.info("No linkable urls found. Disabling feature...")
        return frozenset(), MappingProxyType({})

    if raw.general.link_matchers is None:
        logger.info("No link matchers found. Disabling feature...")
        return frozenset(), MappingProxyType({})

    if not raw.linkable_urls:
        raise LinkConfigError()

    links = {key: parse_url(value, "URL") for key, value in raw.linkable_urls.items()}
    return frozenset(raw.general.link_matchers), MappingProxyType(links)


def resolve_unit_conversion_exclusion(raw: RawConfig) -> frozenset[str]:
    """Исключения конвертации; к каждому добавляется ведущий пробел."""
    exclusion = raw.general.unit_conversion_exclusion
    if exclusion is None:
        logger.info("No unit conversion exclusions found. Disabling feature...")
        return frozenset()
    return frozenset(" " + unit for unit in exclusion)


def resolve_corrections(
    raw: RawConfig,
) -> tuple[tuple[SpellCheckRule, ...], str, frozenset[RoomId]]:
    """
    Возвращает (правила, текст исправления, исключённые комнаты).

    Сначала идут все регистронезависимые правила, затем регистрозависимые,
    каждая группа - в порядке из конфига.
    """
    general = raw.general
    if not general.enable_corrections:
        logger.info("Disabling corrections feature")
        return (), "", frozenset()

    if general.insensitive_corrections is None:
        raise CorrectionConfigError("case insensitive corrections")
    if general.sensitive_corrections is None:
        raise CorrectionConfigError("case sensitive corrections")
    if general.correction_text is None:
        raise CorrectionConfigError("correction text")

    if not general.correction_exclusion:
        logger.info("No rooms will be excluded from corrections")
        exclusion: frozenset[RoomId] = frozenset()
    else:
        exclusion = frozenset(RoomId(room) for room in general.correction_exclusion)

    rules: list[SpellCheckRule] = [CaseInsensitive(s) for s in general.insensitive_corrections]
    rules.extend(CaseSensitive(s) for s in general.sensitive_corrections)
    return tuple(rules), general.correction_text, exclusion


def resolve_admins(raw: RawConfig) -> frozenset[UserId]:
    """Нужен хотя бы один администратор."""
    if not raw.general.authorized_users:
        raise AdminConfigError()
    return frozenset(UserId(user) for user in raw.general.authorized_users)


def resolve_help_rooms(raw: RawConfig) -> frozenset[RoomId]:
    """Пустое множество значит «все комнаты»."""
    if raw.general.help_rooms is None:
        logger.info("No help rooms specified. Allowing all rooms.")
        return frozenset()
    return frozenset(RoomId(room) for room in raw.general.help_rooms)
