"""
lanchat: terminal view renderer for a LAN chat client.

Turns the chat log and transient UI state into a bordered, scrollable
transcript and an input box, following Parnas's information hiding
principles: each module hides one design decision.
"""

__version__ = "0.1.0"

from .render import RenderConfig, RenderError, Renderer, create_surface, draw
from .state import (
    ApplicationState,
    ChatEntry,
    Connection,
    Content,
    Disconnection,
    Severity,
    SystemNotice,
)

__all__ = [
    "ApplicationState",
    "ChatEntry",
    "Connection",
    "Content",
    "Disconnection",
    "RenderConfig",
    "RenderError",
    "Renderer",
    "Severity",
    "SystemNotice",
    "create_surface",
    "draw",
]
