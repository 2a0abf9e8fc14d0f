"""
Доменные исключения.

Все исключения бизнес-логики должны наследоваться от DomainException.
Ошибки запуска (конфиг, хранилища) несут код завершения процесса;
решение о выходе принимает только точка входа.
"""
from pathlib import Path

from mxbot.core.constants import (
    EXIT_ADMIN_CONFIG,
    EXIT_CONFIG_FILE,
    EXIT_CORRECTION_CONFIG,
    EXIT_PARSE,
    EXIT_READ,
    EXIT_SEARCH_CONFIG,
    EXIT_SERIALIZE,
    EXIT_STORE_CREATE,
    EXIT_STORE_WRITE,
    EXIT_SYNC_STOPPED,
    EXIT_USER_AGENT,
)


class DomainException(Exception):
    """Базовое исключение доменного слоя."""

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class StartupError(DomainException):
    """Фатальная ошибка, после которой процесс завершается с exit_code."""

    exit_code: int = 1

    def __init__(self, message: str, code: str = None, exit_code: int = None):
        super().__init__(message, code)
        if exit_code is not None:
            self.exit_code = exit_code


# ═══════════════════════════════════════════════════════════
# ⚙️ CONFIG
# ═══════════════════════════════════════════════════════════


class ConfigError(StartupError):
    """Ошибка конфигурации."""


class ConfigFileError(ConfigError):
    """config.toml не найден или не открывается."""

    exit_code = EXIT_CONFIG_FILE

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Unable to open {path}: {reason}", code="CONFIG_FILE")
        self.path = path


class ConfigReadError(ConfigError):
    """config.toml открыт, но не читается."""

    exit_code = EXIT_READ

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Unable to read {path}: {reason}", code="CONFIG_READ")
        self.path = path


class ConfigParseError(ConfigError):
    """Невалидный TOML или значение не соответствует схеме."""

    exit_code = EXIT_PARSE

    def __init__(self, message: str):
        super().__init__(message, code="CONFIG_PARSE")


class LinkConfigError(ConfigError):
    """link_matchers заданы, а linkable_urls пуст."""

    exit_code = EXIT_CONFIG_FILE

    def __init__(self):
        super().__init__("Link matchers exist but no linkable urls are set", code="LINK_CONFIG")


class SearchConfigError(ConfigError):
    """Есть searchable_repos, но нет токена GitHub."""

    exit_code = EXIT_SEARCH_CONFIG

    def __init__(self):
        super().__init__(
            "Searchable repos configured, but no github access token found", code="SEARCH_CONFIG"
        )


class CorrectionConfigError(ConfigError):
    """Исправления включены, но не хватает обязательного поля."""

    exit_code = EXIT_CORRECTION_CONFIG

    def __init__(self, missing: str):
        super().__init__(
            f"No {missing} provided even though corrections have been enabled", code="CORRECTION_CONFIG"
        )
        self.missing = missing


class AdminConfigError(ConfigError):
    """Не задан ни один администратор."""

    exit_code = EXIT_ADMIN_CONFIG

    def __init__(self):
        super().__init__("You must provide at least 1 authorized user", code="ADMIN_CONFIG")


class UserAgentError(ConfigError):
    """Не удалось собрать User-Agent из имени и версии."""

    exit_code = EXIT_USER_AGENT

    def __init__(self, user_agent: str):
        super().__init__(f"Unable to create valid user agent from {user_agent!r}", code="USER_AGENT")
        self.user_agent = user_agent


# ═══════════════════════════════════════════════════════════
# 💾 STORAGE
# ═══════════════════════════════════════════════════════════


class StorageError(StartupError):
    """Ошибка файла состояния."""

    def __init__(self, path: Path, reason: str, code: str = None):
        super().__init__(f"{path.name}: {reason}", code=code)
        self.path = path
        self.reason = reason


class StoreOpenError(StorageError):
    """Файл состояния существует, но не открывается."""

    exit_code = EXIT_CONFIG_FILE


class StoreReadError(StorageError):
    """Файл состояния открыт, но не читается."""

    exit_code = EXIT_READ


class StoreCorruptedError(StorageError):
    """Содержимое файла не соответствует схеме."""

    exit_code = EXIT_PARSE


class StoreSerializeError(StorageError):
    """Состояние в памяти не сериализуется. Не должно случаться."""

    exit_code = EXIT_SERIALIZE


class StoreCreateError(StorageError):
    """Не удалось открыть или создать файл для записи."""

    exit_code = EXIT_STORE_CREATE


class StoreWriteError(StorageError):
    """Не удалось записать файл."""

    exit_code = EXIT_STORE_WRITE


# ═══════════════════════════════════════════════════════════
# 🔄 SYNC
# ═══════════════════════════════════════════════════════════


class SyncStoppedError(StartupError):
    """Синхронизация с сервером завершилась сама, без shutdown."""

    exit_code = EXIT_SYNC_STOPPED

    def __init__(self, reason: str):
        super().__init__(f"Syncing stopped unexpectedly: {reason}", code="SYNC_STOPPED")
        self.reason = reason
