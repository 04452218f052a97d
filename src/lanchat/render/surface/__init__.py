"""Drawable surfaces the renderer writes frames into."""

from .base import Surface
from .console import ConsoleSurface
from .factory import create_surface

__all__ = [
    "Surface",
    "ConsoleSurface",
    "create_surface",
]
