"""Factory for creating drawable surfaces."""

from typing import Any

from .base import Surface


def create_surface(kind: str = "console", **config: Any) -> Surface:
    """Create a surface instance.

    This factory function hides which backend the frames are written to.

    Args:
        kind: Surface type ("console" currently supported)
        **config: Surface-specific configuration
            - console: rich.console.Console to write to (default: stdout)

    Returns:
        Surface instance

    Raises:
        ValueError: If surface type is not supported

    Example:
        >>> surface = create_surface("console", console=Console(width=80, height=24))
        >>> draw(surface, state)
    """
    if kind == "console":
        from .console import ConsoleSurface
        return ConsoleSurface(**config)

    raise ValueError(
        f"Unsupported surface: {kind}. "
        f"Supported surfaces: console"
    )
