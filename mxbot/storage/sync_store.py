"""
SyncStore для mautrix поверх ListenerStore.

Токен синхронизации переживает перезапуск; filter id живёт только в памяти.
"""
import logging
from typing import Callable, Optional

from mautrix.client.state_store import SyncStore
from mautrix.types import FilterID, SyncToken

from mxbot.domain import StorageError

from .stores import ListenerStore

logger = logging.getLogger(__name__)


class ListenerSyncStore(SyncStore):
    """
    Хранит токен синхронизации в matrix_listener.json.

    mautrix перехватывает ошибки put_next_batch и продолжает синхронизацию,
    поэтому ошибка хранилища передаётся в on_fatal. Без on_fatal она
    пробрасывается как есть.
    """

    def __init__(
        self,
        storage: ListenerStore,
        on_fatal: Optional[Callable[[StorageError], None]] = None,
    ):
        self.storage = storage
        self.on_fatal = on_fatal
        self._filter_id: Optional[FilterID] = None

    async def put_filter_id(self, filter_id: FilterID) -> None:
        self._filter_id = filter_id

    async def get_filter_id(self) -> Optional[FilterID]:
        return self._filter_id

    async def put_next_batch(self, next_batch: SyncToken) -> None:
        try:
            self.storage.set_last_sync(next_batch)
        except StorageError as e:
            if self.on_fatal is None:
                raise
            logger.error(f"❌ Unable to save sync token: {e}")
            self.on_fatal(e)

    async def get_next_batch(self) -> Optional[SyncToken]:
        return self.storage.last_sync
