"""
Обработчик приглашений в комнаты.
"""
import logging

from mautrix.types import StateEvent

from mxbot.config import Config
from mxbot.services import Responder

logger = logging.getLogger(__name__)


class InviteHandlers:
    """Принимает приглашения только от администраторов."""

    def __init__(self, config: Config, responder: Responder):
        self.config = config
        self.responder = responder

    async def handle_invite(self, evt: StateEvent) -> None:
        if evt.state_key != self.config.username:
            return
        if self.config.is_admin(evt.sender):
            await self.responder.accept_invite(evt.sender, evt.room_id)
        else:
            await self.responder.reject_invite(evt.sender, evt.room_id)
