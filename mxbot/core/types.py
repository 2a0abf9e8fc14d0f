"""
Type aliases для улучшения читаемости кода.
"""

from typing import NewType

from mautrix.types import RoomID, UserID

# Matrix типы (из mautrix, чтобы не плодить свои)
UserId = UserID
RoomId = RoomID

# Состояние между перезапусками
SyncToken = NewType("SyncToken", str)
TxnId = NewType("TxnId", str)

# Временные типы
Seconds = NewType("Seconds", int)
