"""Renderer errors."""


class RenderError(Exception):
    """A frame could not be drawn or committed to the surface.

    The underlying cause is chained. The caller decides whether to retry on
    the next tick or give up.
    """

    def __init__(self, message: str, stage: str = "commit"):
        super().__init__(f"Render failed during {stage}: {message}")
        self.stage = stage
