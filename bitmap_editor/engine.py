from collections.abc import Callable
from logging import getLogger
from typing import Protocol

from .draw import PixelCanvas
from .errors import DuplicateImageError, InvalidArgumentError, NoImageError

logger = getLogger(__name__)


class Canvas(Protocol):
    """What the engine needs from a canvas. Indices are 0-based and valid."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def color_at(self, x: int, y: int) -> str: ...

    def set_color(self, x: int, y: int, col: str) -> None: ...

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, col: str) -> None: ...

    def clear(self) -> None: ...

    def flood_fill(self, x: int, y: int, col: str) -> None: ...

    def rows(self) -> list[list[str]]: ...


CanvasFactory = Callable[[int, int], Canvas]


def coerce_to_cell_idx(num: int) -> int:
    return num - 1


class DrawingEngine:
    """
    Applies drawing commands to the canvas of one script run.

    All coordinates taken here are 1-based, as written in scripts. They are
    checked against the canvas size before anything is painted, so a
    rejected command never leaves a partial write behind.
    """

    def __init__(self, canvas_factory: CanvasFactory = PixelCanvas):
        self.canvas_factory: CanvasFactory = canvas_factory
        self._canvas: Canvas | None = None

    @property
    def canvas(self) -> Canvas | None:
        return self._canvas

    @property
    def has_image(self) -> bool:
        return self._canvas is not None

    def _ensure_canvas(self) -> Canvas:
        if self._canvas is None:
            raise NoImageError(
                "Tried to run a command on an image without creating it first"
            )
        return self._canvas

    def create(self, width: int, height: int) -> None:
        if self._canvas is not None:
            raise DuplicateImageError("Cannot create multiple images")
        if width < 1 or height < 1:
            raise InvalidArgumentError(f"Invalid image size {width}x{height}")
        self._canvas = self.canvas_factory(width, height)
        logger.info(f"Created {width}x{height} image")

    def clear(self) -> None:
        self._ensure_canvas().clear()

    def set_pixel(self, column: int, row: int, color: str) -> None:
        self._paint_rect(color, start_row=row, start_column=column)

    def draw_vertical(
        self, column: int, start_row: int, end_row: int, color: str
    ) -> None:
        self._paint_rect(
            color, start_row=start_row, end_row=end_row, start_column=column
        )

    def draw_horizontal(
        self, start_column: int, end_column: int, row: int, color: str
    ) -> None:
        self._paint_rect(
            color, start_row=row, start_column=start_column, end_column=end_column
        )

    def flood_fill(self, column: int, row: int, color: str) -> None:
        canvas = self._ensure_canvas()
        if not 1 <= row <= canvas.height:
            raise InvalidArgumentError("Fill row out of bounds")
        if not 1 <= column <= canvas.width:
            raise InvalidArgumentError("Fill column out of bounds")

        x, y = coerce_to_cell_idx(column), coerce_to_cell_idx(row)
        if canvas.color_at(x, y) == color:
            logger.debug(f"Fill at ({column}, {row}) already {color}")
            return
        canvas.flood_fill(x, y, color)

    def _paint_rect(
        self,
        color: str,
        *,
        start_row: int,
        start_column: int,
        end_row: int | None = None,
        end_column: int | None = None,
    ) -> None:
        canvas = self._ensure_canvas()
        end_row = start_row if end_row is None else end_row
        end_column = start_column if end_column is None else end_column

        rows, columns = canvas.height, canvas.width
        if not 1 <= start_row <= rows:
            raise InvalidArgumentError("Start row out of bounds")
        if end_row < start_row:
            raise InvalidArgumentError("End row smaller than start row")
        if end_row > rows:
            raise InvalidArgumentError("End row out of bounds")

        if not 1 <= start_column <= columns:
            raise InvalidArgumentError("Start column out of bounds")
        if end_column < start_column:
            raise InvalidArgumentError("End column smaller than start column")
        if end_column > columns:
            raise InvalidArgumentError("End column out of bounds")

        canvas.fill_rect(
            coerce_to_cell_idx(start_column),
            coerce_to_cell_idx(start_row),
            coerce_to_cell_idx(end_column),
            coerce_to_cell_idx(end_row),
            color,
        )
