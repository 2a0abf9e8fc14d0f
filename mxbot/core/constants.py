"""
Константы приложения.
"""

# Переменные окружения
CONFIG_DIR_ENV = "MATRIX_BOT_CONFIG_DIR"
DATA_DIR_ENV = "MATRIX_BOT_DATA_DIR"

# Файлы
CONFIG_FILENAME = "config.toml"
SESSION_FILENAME = "session.json"
LISTENER_FILENAME = "matrix_listener.json"
RESPONDER_FILENAME = "matrix_responder.json"

# Кулдаун исправлений в одной комнате
CORRECTION_COOLDOWN_SECONDS = 300

# Префиксы участников group pings
USER_PREFIX = "@"
ALIAS_PREFIX = "%"

# Верхняя граница счётчика транзакций (u64)
MAX_TXN_ID = 2**64 - 1

# Коды завершения процесса
EXIT_CONFIG_FILE = 1
EXIT_READ = 2
EXIT_PARSE = 3
EXIT_SEARCH_CONFIG = 4
EXIT_CORRECTION_CONFIG = 5
EXIT_ADMIN_CONFIG = 6
EXIT_SERIALIZE = 7
EXIT_USER_AGENT = 8
EXIT_STORE_CREATE = 9
EXIT_STORE_WRITE = 10
EXIT_SYNC_STOPPED = 1
