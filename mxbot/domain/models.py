"""
Доменные модели (value objects).

Правила:
- Используем dataclasses для immutability
- Модели не знают о файлах и сети
"""
import re
from dataclasses import dataclass
from typing import Union

# @localpart:server и !opaque:server
_USER_ID_RE = re.compile(r"^@[^\s:]+:[^\s:]+(:\d+)?$")
_ROOM_ID_RE = re.compile(r"^![^\s:]+:[^\s:]+(:\d+)?$")


def is_valid_user_id(value: str) -> bool:
    """Проверяет формат Matrix user id."""
    return bool(_USER_ID_RE.match(value))


def is_valid_room_id(value: str) -> bool:
    """Проверяет формат Matrix room id."""
    return bool(_ROOM_ID_RE.match(value))


def _word_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    return re.compile(rf"(?<!\w){re.escape(pattern)}(?!\w)", flags)


@dataclass(frozen=True, slots=True, eq=False)
class CaseInsensitive:
    """Написание, которое ищется без учёта регистра."""

    pattern: str

    def matches(self, text: str) -> bool:
        return _word_pattern(self.pattern, re.IGNORECASE).search(text) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaseInsensitive):
            return NotImplemented
        return self.pattern.casefold() == other.pattern.casefold()

    def __hash__(self) -> int:
        return hash((CaseInsensitive, self.pattern.casefold()))

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True, slots=True)
class CaseSensitive:
    """Написание, которое ищется с точным регистром."""

    pattern: str

    def matches(self, text: str) -> bool:
        return _word_pattern(self.pattern).search(text) is not None

    def __str__(self) -> str:
        return self.pattern


SpellCheckRule = Union[CaseInsensitive, CaseSensitive]
