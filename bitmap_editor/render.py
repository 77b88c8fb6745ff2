from typing import Final

from .engine import Canvas

NO_IMAGE: Final = "There is no image"


def render(canvas: Canvas | None) -> str:
    """Render the canvas as one line of color letters per row."""
    if canvas is None:
        return NO_IMAGE
    return "\n".join("".join(row) for row in canvas.rows())
