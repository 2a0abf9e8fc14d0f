"""
Отправка сообщений и ответы на приглашения.

Каждое событие получает transaction id из ResponderStore; id сохраняется
на диск до отправки. Ошибки отправки только логируются.
"""
import logging
from typing import Optional

import aiohttp
from mautrix.client import Client
from mautrix.errors import MatrixError
from mautrix.types import EventType, Format, MessageType, RoomID, TextMessageEventContent, UserID

from mxbot.storage import ResponderStore

logger = logging.getLogger(__name__)


class Responder:
    """Отправитель сообщений от имени бота."""

    def __init__(self, client: Client, storage: ResponderStore):
        self.client = client
        self.storage = storage

    async def _send(self, room_id: RoomID, content: TextMessageEventContent) -> bool:
        txn_id = self.storage.next_txn_id()
        try:
            await self.client.send_message_event(room_id, EventType.ROOM_MESSAGE, content, txn_id=txn_id)
            return True
        except (MatrixError, aiohttp.ClientError) as e:
            logger.error(f"Unable to send response to {room_id} due to error {e!r}")
            return False

    async def send_notice(self, room_id: RoomID, message: str) -> bool:
        content = TextMessageEventContent(msgtype=MessageType.NOTICE, body=message)
        return await self._send(room_id, content)

    async def send_text(self, room_id: RoomID, message: str) -> bool:
        content = TextMessageEventContent(msgtype=MessageType.TEXT, body=message)
        return await self._send(room_id, content)

    async def send_formatted_notice(
        self, room_id: RoomID, message: str, formatted_message: Optional[str] = None
    ) -> bool:
        """Notice с HTML-версией текста."""
        content = TextMessageEventContent(
            msgtype=MessageType.NOTICE,
            body=message,
            format=Format.HTML,
            formatted_body=formatted_message or "",
        )
        return await self._send(room_id, content)

    async def accept_invite(self, sender: UserID, room_id: RoomID) -> None:
        logger.info(f"Authorized user {sender} invited me to room {room_id}")
        try:
            await self.client.join_room_by_id(room_id)
            logger.info(f"✅ Successfully joined room {room_id}")
        except (MatrixError, aiohttp.ClientError) as e:
            logger.debug(f"Unable to join room {room_id} because of error {e!r}")

    async def reject_invite(self, sender: UserID, room_id: RoomID) -> None:
        """Отклоняет приглашение и пишет в лог, кто его прислал."""
        try:
            await self.client.leave_room(room_id)
            logger.info(f"Rejected invite from unauthorized user {sender}")
        except (MatrixError, aiohttp.ClientError) as e:
            logger.debug(f"Unable to reject invite because of error {e!r}")
