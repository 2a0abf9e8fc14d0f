"""
Доменный слой - модели и исключения.

Правила:
- НЕ зависит от других слоев (кроме core)
- Immutable модели где возможно
"""

from .exceptions import (
    AdminConfigError,
    ConfigError,
    ConfigFileError,
    ConfigParseError,
    ConfigReadError,
    CorrectionConfigError,
    DomainException,
    LinkConfigError,
    SearchConfigError,
    StartupError,
    StorageError,
    StoreCorruptedError,
    StoreCreateError,
    StoreOpenError,
    StoreReadError,
    StoreSerializeError,
    StoreWriteError,
    SyncStoppedError,
    UserAgentError,
)
from .models import (
    CaseInsensitive,
    CaseSensitive,
    SpellCheckRule,
    is_valid_room_id,
    is_valid_user_id,
)

__all__ = [
    # Models
    "CaseInsensitive",
    "CaseSensitive",
    "SpellCheckRule",
    "is_valid_user_id",
    "is_valid_room_id",
    # Exceptions
    "DomainException",
    "StartupError",
    "ConfigError",
    "ConfigFileError",
    "ConfigReadError",
    "ConfigParseError",
    "LinkConfigError",
    "SearchConfigError",
    "CorrectionConfigError",
    "AdminConfigError",
    "UserAgentError",
    "StorageError",
    "StoreOpenError",
    "StoreReadError",
    "StoreCorruptedError",
    "StoreSerializeError",
    "SyncStoppedError",
    "StoreCreateError",
    "StoreWriteError",
]
