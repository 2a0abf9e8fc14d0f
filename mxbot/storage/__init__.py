from .json_store import JsonStore
from .state import ListenerState, ResponderState, Session, SessionState
from .stores import CORRECTION_COOLDOWN, ListenerStore, ResponderStore, SessionStore

__all__ = [
    "JsonStore",
    "SessionStore",
    "ListenerStore",
    "ResponderStore",
    "Session",
    "SessionState",
    "ListenerState",
    "ResponderState",
    "CORRECTION_COOLDOWN",
]
