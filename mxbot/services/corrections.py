"""
Сервис исправления написаний.
"""

import logging
from datetime import datetime
from typing import Optional, assert_never

from mxbot.config import Config
from mxbot.domain import CaseInsensitive, CaseSensitive, SpellCheckRule
from mxbot.storage import ListenerStore

logger = logging.getLogger(__name__)


def describe_rule(rule: SpellCheckRule) -> str:
    """Короткое описание правила для логов."""
    match rule:
        case CaseInsensitive():
            return f"{rule} (case insensitive)"
        case CaseSensitive():
            return f"{rule} (case sensitive)"
        case _:
            assert_never(rule)


class CorrectionService:
    """Находит неправильные написания и следит за кулдауном по комнатам."""

    def __init__(self, config: Config, storage: ListenerStore):
        self.config = config
        self.storage = storage

    def find_rule(self, text: str) -> Optional[SpellCheckRule]:
        """Первое сработавшее правило в порядке из конфига."""
        for rule in self.config.spell_check_rules:
            if rule.matches(text):
                return rule
        return None

    def check(self, room_id: str, sender: str, text: str, now: Optional[datetime] = None) -> Optional[str]:
        """
        Возвращает текст исправления или None.

        Если исправление выдано, время записывается в хранилище.
        """
        if not self.config.corrections_enabled:
            return None
        if room_id in self.config.correction_exclusion:
            return None

        rule = self.find_rule(text)
        if rule is None:
            return None

        if not self.storage.correction_cooldown_passed(room_id, now):
            logger.debug(f"Correction for {describe_rule(rule)} suppressed in {room_id}: cooldown")
            return None

        try:
            message = self.config.correction_text.format(sender, rule)
        except (IndexError, KeyError) as e:
            logger.error(f"Invalid correction text {self.config.correction_text!r}: {e!r}")
            return None

        self.storage.record_correction(room_id, now)
        logger.info(f"Correcting {sender} in {room_id}: {describe_rule(rule)}")
        return message
