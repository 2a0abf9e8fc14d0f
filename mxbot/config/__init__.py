"""
Конфигурация: сырые модели config.toml, разбор функций и сборка Config.
"""

from .features import (
    resolve_admins,
    resolve_corrections,
    resolve_help_rooms,
    resolve_links,
    resolve_search,
    resolve_unit_conversion_exclusion,
)
from .group_pings import resolve_group_pings
from .loader import Config, assemble_config, build_user_agent, get_config, load_config, read_raw_config
from .raw import RawConfig

__all__ = [
    "Config",
    "RawConfig",
    "load_config",
    "get_config",
    "read_raw_config",
    "assemble_config",
    "build_user_agent",
    "resolve_search",
    "resolve_links",
    "resolve_unit_conversion_exclusion",
    "resolve_corrections",
    "resolve_admins",
    "resolve_help_rooms",
    "resolve_group_pings",
]
