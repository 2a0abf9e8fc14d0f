"""
Пути к конфигу и файлам состояния.

Каталоги можно переопределить через окружение (или .env).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import CONFIG_DIR_ENV, CONFIG_FILENAME, DATA_DIR_ENV

load_dotenv()


def _base_dir(env_name: str) -> Path:
    value = os.getenv(env_name)
    return Path(value) if value else Path.cwd()


def config_path() -> Path:
    """Путь к config.toml."""
    return _base_dir(CONFIG_DIR_ENV) / CONFIG_FILENAME


def data_path(filename: str) -> Path:
    """Путь к файлу состояния с фиксированным именем."""
    return _base_dir(DATA_DIR_ENV) / filename
