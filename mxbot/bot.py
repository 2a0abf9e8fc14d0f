"""
Главный модуль бота с graceful shutdown.
"""
import asyncio
import logging
import signal
import sys
from typing import Awaitable, Callable, Optional

from mautrix.client import Client, InternalEventType
from mautrix.client.dispatcher import MembershipEventDispatcher
from mautrix.errors import MUnknownToken
from mautrix.types import EventType, UserID

from mxbot.config import Config, load_config
from mxbot.config.loader import DIST_NAME
from mxbot.domain import StartupError, StorageError, SyncStoppedError
from mxbot.handlers import InviteHandlers, MessageHandlers
from mxbot.services import CorrectionService, GroupPingService, Responder
from mxbot.storage import ListenerStore, ResponderStore, Session, SessionStore
from mxbot.storage.sync_store import ListenerSyncStore

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO
)
logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[None]]


class Bot:
    """Главный класс бота."""

    def __init__(self):
        self.config: Optional[Config] = None
        self.client: Optional[Client] = None
        self.session_store: Optional[SessionStore] = None
        self.listener_store: Optional[ListenerStore] = None
        self.responder_store: Optional[ResponderStore] = None
        self._fatal: Optional[StartupError] = None
        self._shutdown_event = asyncio.Event()
        self._sync_task: Optional[asyncio.Future] = None

    def load(self) -> None:
        """Конфиг и хранилища. Любая ошибка здесь фатальна."""
        self.config = load_config()
        self.session_store = SessionStore.load()
        self.listener_store = ListenerStore.load()
        self.responder_store = ResponderStore.load()

    async def setup(self) -> None:
        """Инициализация бота."""
        self.load()

        self.client = Client(
            mxid=UserID(self.config.username),
            base_url=str(self.config.homeserver_url),
            sync_store=ListenerSyncStore(self.listener_store, on_fatal=self._on_fatal),
        )
        # m.room.member -> InternalEventType.INVITE и т.п.
        self.client.add_dispatcher(MembershipEventDispatcher)

        await self._login()

        # Сервисы
        responder = Responder(self.client, self.responder_store)
        corrections = CorrectionService(self.config, self.listener_store)
        group_pings = GroupPingService(self.config)

        # Обработчики
        invites = InviteHandlers(self.config, responder)
        messages = MessageHandlers(self.config, corrections, group_pings, responder)
        self.client.add_event_handler(InternalEventType.INVITE, self._guard(invites.handle_invite))
        self.client.add_event_handler(EventType.ROOM_MESSAGE, self._guard(messages.handle_message))

        logger.info("✅ Bot initialized")

    async def _login(self) -> None:
        """Восстанавливает сохранённую сессию или логинится паролем."""
        session = self.session_store.session
        if session is not None and session.user_id == self.config.username:
            self.client.api.token = session.access_token
            self.client.device_id = session.device_id
            try:
                await self.client.whoami()
                logger.info(f"✅ Restored session for {session.user_id}")
                return
            except MUnknownToken:
                logger.warning("⚠️ Saved session is no longer valid, logging in again")

        response = await self.client.login(password=self.config.password, device_name=DIST_NAME)
        self.session_store.set_session(
            Session(
                user_id=response.user_id,
                access_token=response.access_token,
                device_id=response.device_id,
            )
        )
        logger.info(f"✅ Logged in as {response.user_id}")

    def _guard(self, handler: Handler) -> Handler:
        """Ошибка хранилища в обработчике останавливает бота."""

        async def wrapper(evt) -> None:
            try:
                await handler(evt)
            except StorageError as e:
                logger.error(f"❌ Storage error in {handler.__name__}: {e}")
                self._on_fatal(e)

        return wrapper

    def _on_fatal(self, error: StartupError) -> None:
        """Запоминает первую фатальную ошибку и запускает shutdown."""
        if self._fatal is None:
            self._fatal = error
        self._shutdown_event.set()

    def _on_sync_done(self, task: asyncio.Future) -> None:
        """Синхронизация закончилась сама, без shutdown: бот останавливается."""
        if self._shutdown_event.is_set():
            return
        error = None if task.cancelled() else task.exception()
        reason = repr(error) if error is not None else "sync loop exited"
        logger.error(f"❌ Syncing stopped: {reason}")
        self._on_fatal(SyncStoppedError(reason))

    async def run(self) -> None:
        """Запуск бота."""
        await self.setup()

        # Graceful shutdown
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self._shutdown_event.set)
            except NotImplementedError:
                signal.signal(sig, lambda s, f: loop.call_soon_threadsafe(self._shutdown_event.set))

        logger.info("🚀 Bot started!")
        self._sync_task = self.client.start(None)
        self._sync_task.add_done_callback(self._on_sync_done)

        await self._shutdown_event.wait()
        await self.shutdown()

        if self._fatal is not None:
            raise self._fatal

    async def shutdown(self) -> None:
        """Graceful shutdown."""
        logger.info("🛑 Shutting down...")

        if self.client:
            self.client.stop()
            await self.client.api.session.close()

        logger.info("👋 Bot stopped")


def main() -> None:
    """Точка входа."""
    try:
        asyncio.run(Bot().run())
    except StartupError as e:
        logger.error(f"❌ {e.code}: {e.message}")
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        logger.info("👋 Interrupted")
    except Exception as e:
        logger.error(f"❌ Fatal: {e}")
        raise


if __name__ == "__main__":
    main()
