"""
Три независимых хранилища состояния бота.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from mxbot.core.constants import (
    CORRECTION_COOLDOWN_SECONDS,
    LISTENER_FILENAME,
    RESPONDER_FILENAME,
    SESSION_FILENAME,
)

from .json_store import JsonStore
from .state import ListenerState, ResponderState, Session, SessionState

logger = logging.getLogger(__name__)

CORRECTION_COOLDOWN = timedelta(seconds=CORRECTION_COOLDOWN_SECONDS)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionStore(JsonStore[SessionState]):
    """Сессия Matrix (пусто до первого логина)."""

    filename = SESSION_FILENAME
    state_type = SessionState

    @property
    def session(self) -> Optional[Session]:
        return self.state.session

    def set_session(self, session: Optional[Session]) -> None:
        with self.transaction() as state:
            state.session = session


class ListenerStore(JsonStore[ListenerState]):
    """Токен синхронизации и время последних исправлений по комнатам."""

    filename = LISTENER_FILENAME
    state_type = ListenerState

    @property
    def last_sync(self) -> Optional[str]:
        return self.state.last_sync

    def set_last_sync(self, token: Optional[str]) -> None:
        with self.transaction() as state:
            state.last_sync = token

    def correction_cooldown_passed(self, room_id: str, now: Optional[datetime] = None) -> bool:
        """
        Прошёл ли кулдаун исправлений в комнате.

        True, если в комнате ещё не было исправлений. Если записанное время
        в будущем (часы сдвинулись), кулдаун считается не прошедшим.
        """
        last = self.state.last_correction_time.get(room_id)
        if last is None:
            return True

        elapsed = (now or _utcnow()) - last
        if elapsed < timedelta(0):
            return False
        return elapsed >= CORRECTION_COOLDOWN

    def record_correction(self, room_id: str, now: Optional[datetime] = None) -> None:
        with self.transaction() as state:
            state.last_correction_time[room_id] = now or _utcnow()


class ResponderStore(JsonStore[ResponderState]):
    """Счётчик transaction id для исходящих событий."""

    filename = RESPONDER_FILENAME
    state_type = ResponderState

    def next_txn_id(self) -> str:
        """
        Увеличивает счётчик на единицу и возвращает его.

        Новое значение сохраняется на диск до возврата, поэтому после
        падения процесса id не повторится.
        """
        with self.transaction() as state:
            state.last_txn_id += 1
            txn_id = state.last_txn_id
        return str(txn_id)
