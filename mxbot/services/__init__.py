from .corrections import CorrectionService
from .group_pings import GroupPingService
from .responder import Responder

__all__ = ["CorrectionService", "GroupPingService", "Responder"]
