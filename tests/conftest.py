"""
Общие фикстуры для тестов.
"""
import pytest
import sys
from pathlib import Path
from typing import Any, Callable, Dict

# Добавляем корень проекта в путь
sys.path.insert(0, str(Path(__file__).parent.parent))

from mxbot.config import Config, RawConfig, assemble_config
from mxbot.core.constants import CONFIG_DIR_ENV, DATA_DIR_ENV
from mxbot.storage import ListenerStore, ResponderStore, SessionStore


# ═══════════════════════════════════════════════════════════════════════════════
# ENVIRONMENT FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Конфиг и файлы состояния - только во временной папке."""
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    return tmp_path


# ═══════════════════════════════════════════════════════════════════════════════
# CONFIG FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def raw_config_data() -> Dict[str, Any]:
    """Минимальный валидный конфиг: все опциональные функции выключены."""
    return {
        "general": {
            "authorized_users": ["@admin:example.org"],
            "enable_unit_conversions": True,
            "enable_corrections": False,
            "webhook_token": "webhook-secret",
        },
        "matrix_authentication": {
            "url": "https://matrix.example.org",
            "username": "@bot:example.org",
            "password": "hunter2",
        },
    }


@pytest.fixture
def corrections_data(raw_config_data: Dict[str, Any]) -> Dict[str, Any]:
    """Конфиг с включёнными исправлениями."""
    raw_config_data["general"].update(
        {
            "enable_corrections": True,
            "insensitive_corrections": ["jellyfish"],
            "sensitive_corrections": ["JellyFin"],
            "correction_text": "{}: did you mean Jellyfin instead of {}?",
        }
    )
    return raw_config_data


@pytest.fixture
def make_raw() -> Callable[[Dict[str, Any]], RawConfig]:
    """Фабрика RawConfig из словаря."""
    return RawConfig.model_validate


@pytest.fixture
def make_config(make_raw) -> Callable[[Dict[str, Any]], Config]:
    """Фабрика готового Config из словаря."""
    return lambda data: assemble_config(make_raw(data))


# ═══════════════════════════════════════════════════════════════════════════════
# STORAGE FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def session_store(isolated_dirs: Path) -> SessionStore:
    return SessionStore.load()


@pytest.fixture
def listener_store(isolated_dirs: Path) -> ListenerStore:
    return ListenerStore.load()


@pytest.fixture
def responder_store(isolated_dirs: Path) -> ResponderStore:
    return ResponderStore.load()


# ═══════════════════════════════════════════════════════════════════════════════
# TEST DATA FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_room_id() -> str:
    """Тестовый room id."""
    return "!room:example.org"


@pytest.fixture
def test_user_id() -> str:
    """Тестовый user id."""
    return "@alice:example.org"
