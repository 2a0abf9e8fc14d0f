"""
Ядро приложения - константы, пути и общие типы.

Содержит:
- Константы (имена файлов, переменные окружения, коды выхода)
- Разрешение путей к конфигу и данным
- Type aliases
"""

from .constants import (
    CORRECTION_COOLDOWN_SECONDS,
    LISTENER_FILENAME,
    RESPONDER_FILENAME,
    SESSION_FILENAME,
)
from .paths import config_path, data_path
from .types import RoomId, Seconds, SyncToken, TxnId, UserId

__all__ = [
    # Constants
    "CORRECTION_COOLDOWN_SECONDS",
    "SESSION_FILENAME",
    "LISTENER_FILENAME",
    "RESPONDER_FILENAME",
    # Paths
    "config_path",
    "data_path",
    # Types
    "UserId",
    "RoomId",
    "SyncToken",
    "TxnId",
    "Seconds",
]
