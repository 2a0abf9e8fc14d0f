"""
Конфигурация бота.

config.toml читается один раз при старте, проверяется и собирается
в неизменяемый Config. При любой ошибке бросается ConfigError с кодом
выхода; частично собранный Config наружу не попадает.
"""
import logging
import re
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError
from yarl import URL

import mxbot
from mxbot.core.paths import config_path
from mxbot.core.types import RoomId, UserId
from mxbot.domain import (
    ConfigFileError,
    ConfigParseError,
    ConfigReadError,
    SpellCheckRule,
    UserAgentError,
)

from .features import (
    parse_url,
    resolve_admins,
    resolve_corrections,
    resolve_help_rooms,
    resolve_links,
    resolve_search,
    resolve_unit_conversion_exclusion,
)
from .group_pings import resolve_group_pings
from .raw import RawConfig

logger = logging.getLogger(__name__)

DIST_NAME = "mxbot"

# token из RFC 7230 плюс '/' между именем и версией
_USER_AGENT_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+/[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


@dataclass(frozen=True, slots=True)
class Config:
    """
    Конфигурация, используемая во время работы.

    Без Optional полей: выключенная функция - это пустое значение.
    """

    homeserver_url: URL
    username: UserId
    password: str
    github_token: str
    unit_conversions_enabled: bool
    corrections_enabled: bool
    unit_conversion_exclusion: frozenset[str]
    spell_check_rules: tuple[SpellCheckRule, ...]
    correction_text: str
    correction_exclusion: frozenset[RoomId]
    link_matchers: frozenset[str]
    repos: Mapping[str, str]
    links: Mapping[str, URL]
    admins: frozenset[UserId]
    help_rooms: frozenset[RoomId]
    group_pings: Mapping[str, frozenset[UserId]]
    group_ping_users: frozenset[UserId]
    user_agent: str
    webhook_token: str

    @property
    def search_enabled(self) -> bool:
        return bool(self.repos)

    @property
    def links_enabled(self) -> bool:
        return bool(self.links)

    @property
    def group_pings_enabled(self) -> bool:
        return bool(self.group_pings)

    def is_admin(self, user_id: str) -> bool:
        return user_id in self.admins

    def help_allowed(self, room_id: str) -> bool:
        """Пустой список help_rooms разрешает все комнаты."""
        return not self.help_rooms or room_id in self.help_rooms

    def can_ping(self, user_id: str) -> bool:
        return user_id in self.group_ping_users


def build_user_agent(name: str = DIST_NAME, version: Optional[str] = None) -> str:
    """Строит User-Agent вида имя/версия."""
    if version is None:
        try:
            version = metadata.version(name)
        except metadata.PackageNotFoundError:
            version = mxbot.__version__
    user_agent = f"{name}/{version}"
    if not _USER_AGENT_RE.match(user_agent):
        raise UserAgentError(user_agent)
    return user_agent


def read_raw_config(path: Path) -> RawConfig:
    """Читает и валидирует config.toml."""
    try:
        file = open(path, "rb")
    except FileNotFoundError as e:
        raise ConfigFileError(path, "file not found") from e
    except PermissionError as e:
        raise ConfigFileError(path, "permission denied") from e
    except OSError as e:
        raise ConfigFileError(path, f"unexpected error {e}") from e

    with file:
        try:
            contents = file.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(path, str(e)) from e

    try:
        data = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid toml: {e}") from e

    try:
        return RawConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid config: {e}") from e


def assemble_config(raw: RawConfig) -> Config:
    """Собирает Config из сырых секций."""
    repos, github_token = resolve_search(raw)
    link_matchers, links = resolve_links(raw)
    unit_conversion_exclusion = resolve_unit_conversion_exclusion(raw)
    rules, correction_text, correction_exclusion = resolve_corrections(raw)
    admins = resolve_admins(raw)
    help_rooms = resolve_help_rooms(raw)
    homeserver_url = parse_url(raw.matrix_authentication.url, "homeserver URL")
    user_agent = build_user_agent()
    group_pings, group_ping_users = resolve_group_pings(raw.group_pings)

    return Config(
        homeserver_url=homeserver_url,
        username=UserId(raw.matrix_authentication.username),
        password=raw.matrix_authentication.password,
        github_token=github_token,
        unit_conversions_enabled=raw.general.enable_unit_conversions,
        corrections_enabled=raw.general.enable_corrections,
        unit_conversion_exclusion=unit_conversion_exclusion,
        spell_check_rules=rules,
        correction_text=correction_text,
        correction_exclusion=correction_exclusion,
        link_matchers=link_matchers,
        repos=repos,
        links=links,
        admins=admins,
        help_rooms=help_rooms,
        group_pings=group_pings,
        group_ping_users=group_ping_users,
        user_agent=user_agent,
        webhook_token=raw.general.webhook_token,
    )


def load_config(path: Optional[Path] = None) -> Config:
    """Загружает конфиг из config.toml (по умолчанию - из MATRIX_BOT_CONFIG_DIR)."""
    path = path or config_path()
    config = assemble_config(read_raw_config(path))
    logger.info(f"✅ Config loaded from {path}")
    return config


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Singleton конфиг с кэшированием."""
    return load_config()
