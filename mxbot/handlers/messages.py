"""
Обработчик текстовых сообщений.
"""
import logging

from mautrix.types import MessageEvent, MessageType

from mxbot.config import Config
from mxbot.services import CorrectionService, GroupPingService, Responder

logger = logging.getLogger(__name__)


class MessageHandlers:
    """Исправления написаний и group pings."""

    def __init__(
        self,
        config: Config,
        corrections: CorrectionService,
        group_pings: GroupPingService,
        responder: Responder,
    ):
        self.config = config
        self.corrections = corrections
        self.group_pings = group_pings
        self.responder = responder

    async def handle_message(self, evt: MessageEvent) -> None:
        # Свои сообщения и notices других ботов не обрабатываем
        if evt.sender == self.config.username:
            return
        if evt.content.msgtype != MessageType.TEXT:
            return

        body = evt.content.body or ""

        correction = self.corrections.check(evt.room_id, evt.sender, body)
        if correction:
            await self.responder.send_notice(evt.room_id, correction)

        members = self.group_pings.members_to_ping(evt.sender, body)
        if members:
            await self.responder.send_text(evt.room_id, " ".join(members))
