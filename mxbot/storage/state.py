"""
Схемы файлов состояния.

Файл, который не проходит валидацию, считается повреждённым.
"""
from typing import Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from mxbot.core.constants import MAX_TXN_ID


class _State(BaseModel):
    model_config = ConfigDict(extra="forbid")


class Session(_State):
    """Сессия Matrix после успешного логина."""

    user_id: str
    access_token: str
    device_id: str


class SessionState(_State):
    session: Optional[Session] = None


class ListenerState(_State):
    """Данные слушателя, которые бот меняет во время работы."""

    # Токен последней синхронизации
    last_sync: Optional[str] = None
    # room id -> время последнего исправления
    last_correction_time: dict[str, AwareDatetime] = Field(default_factory=dict)


class ResponderState(_State):
    """Данные отправителя: id последней транзакции."""

    last_txn_id: int = Field(default=0, ge=0, le=MAX_TXN_ID)
