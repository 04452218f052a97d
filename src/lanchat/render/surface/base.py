"""Abstract base class for drawable surfaces.

This module defines the interface the renderer draws a frame into.
The abstraction hides:
- How regions are composed into a full frame
- How and when the frame reaches the terminal
- How the text cursor is positioned
"""

from abc import ABC, abstractmethod

from rich.console import RenderableType

from ..models import Rect


class Surface(ABC):
    """A frame buffer written once per frame.

    Regions and the cursor are buffered until `commit`. A failed commit
    leaves nothing half drawn on the surface's side and raises RenderError.
    """

    @property
    @abstractmethod
    def area(self) -> Rect:
        """The full drawable area, sized to the current terminal."""

    @abstractmethod
    def render(self, renderable: RenderableType, area: Rect) -> None:
        """Queue a Rich renderable to be drawn into `area`."""

    @abstractmethod
    def set_cursor(self, x: int, y: int) -> None:
        """Place the text cursor at absolute screen coordinates."""

    @abstractmethod
    def commit(self) -> None:
        """Write the queued frame.

        Raises:
            RenderError: If the frame cannot be written
        """

    @abstractmethod
    def discard(self) -> None:
        """Drop the queued frame without writing it."""
