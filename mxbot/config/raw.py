"""
Сырые модели config.toml.

Повторяют структуру файла один в один; никакой логики, кроме проверки
формата Matrix идентификаторов. Во время работы используется Config.
"""
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict

from mxbot.domain.models import is_valid_room_id, is_valid_user_id


def _check_user_id(value: str) -> str:
    if not is_valid_user_id(value):
        raise ValueError(f"{value!r} is not a valid Matrix user id")
    return value


def _check_room_id(value: str) -> str:
    if not is_valid_room_id(value):
        raise ValueError(f"{value!r} is not a valid Matrix room id")
    return value


MatrixUserId = Annotated[str, AfterValidator(_check_user_id)]
MatrixRoomId = Annotated[str, AfterValidator(_check_room_id)]


class _Section(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class RawGeneral(_Section):
    """Секция [general]."""

    # Кто может приглашать бота в комнаты
    authorized_users: Optional[set[MatrixUserId]] = None
    help_rooms: Optional[set[MatrixRoomId]] = None
    enable_unit_conversions: bool
    enable_corrections: bool
    # Единицы, которые не конвертируются, если между числом и единицей пробел
    unit_conversion_exclusion: Optional[set[str]] = None
    insensitive_corrections: Optional[list[str]] = None
    sensitive_corrections: Optional[list[str]] = None
    # Должен содержать два '{}'
    correction_text: Optional[str] = None
    correction_exclusion: Optional[set[MatrixRoomId]] = None
    link_matchers: Optional[set[str]] = None
    webhook_token: str


class RawMatrixAuthentication(_Section):
    """Секция [matrix_authentication]."""

    url: str
    username: MatrixUserId
    password: str


class RawGithubAuthentication(_Section):
    """Секция [github_authentication]."""

    access_token: str


class RawConfig(_Section):
    """config.toml целиком."""

    general: RawGeneral
    matrix_authentication: RawMatrixAuthentication
    github_authentication: Optional[RawGithubAuthentication] = None
    # короткое имя -> org/repo
    searchable_repos: Optional[dict[str, str]] = None
    # ключ -> URL
    linkable_urls: Optional[dict[str, str]] = None
    # имя группы -> участники (@user или %группа)
    group_pings: Optional[dict[str, list[str]]] = None
