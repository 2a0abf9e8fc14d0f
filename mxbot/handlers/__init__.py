from .invites import InviteHandlers
from .messages import MessageHandlers

__all__ = ["InviteHandlers", "MessageHandlers"]
