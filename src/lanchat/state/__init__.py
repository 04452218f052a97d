"""Chat session state consumed by the renderer."""

from .application import ApplicationState, UserColorTable
from .models import (
    ChatEntry,
    Connection,
    Content,
    Disconnection,
    InputBuffer,
    MessageKind,
    Severity,
    SystemNotice,
    TransferProgress,
)

__all__ = [
    "ApplicationState",
    "UserColorTable",
    "ChatEntry",
    "Connection",
    "Content",
    "Disconnection",
    "InputBuffer",
    "MessageKind",
    "Severity",
    "SystemNotice",
    "TransferProgress",
]
