from collections.abc import Iterable
from enum import Enum, auto
from logging import getLogger
from pathlib import Path

from .commands import (
    ClearImage,
    Command,
    CreateImage,
    FloodFill,
    HorizontalSegment,
    SetPixel,
    ShowImage,
    VerticalSegment,
    parse_line,
)
from .engine import DrawingEngine
from .errors import BitmapError
from .render import render
from .script import read_script

logger = getLogger(__name__)


class State(Enum):
    NO_IMAGE = auto()
    IMAGE_PRESENT = auto()
    HALTED = auto()


class Interpreter:
    """
    Runs a bitmap script against one drawing engine.

    The first show command renders the image and halts the interpreter,
    any lines after it are ignored. Errors abort the run right away, with
    the line number of the offending line attached. Whatever earlier lines
    painted stays painted.
    """

    def __init__(self, engine: DrawingEngine | None = None):
        self.engine: DrawingEngine = engine or DrawingEngine()
        self._halted: bool = False

    @property
    def state(self) -> State:
        if self._halted:
            return State.HALTED
        if self.engine.has_image:
            return State.IMAGE_PRESENT
        return State.NO_IMAGE

    def execute(self, command: Command) -> str | None:
        """Apply one command. Returns the rendered image for show, else None."""
        if self._halted:
            raise RuntimeError("Interpreter has already halted")

        engine = self.engine
        match command:
            case CreateImage(width, height):
                engine.create(width, height)
            case ClearImage():
                engine.clear()
            case SetPixel(column, row, color):
                engine.set_pixel(column, row, color)
            case VerticalSegment(column, start_row, end_row, color):
                engine.draw_vertical(column, start_row, end_row, color)
            case HorizontalSegment(start_column, end_column, row, color):
                engine.draw_horizontal(start_column, end_column, row, color)
            case FloodFill(column, row, color):
                engine.flood_fill(column, row, color)
            case ShowImage():
                self._halted = True
                logger.info("Show command reached, halting")
                return render(engine.canvas)
        return None

    def run_numbered(self, lines: Iterable[tuple[int, str]]) -> str | None:
        """Run (line number, line) pairs until the first show command."""
        for line_num, line in lines:
            try:
                command = parse_line(line, line_num)
                logger.debug(f"{line_num}: {command}")
                result = self.execute(command)
            except BitmapError as e:
                if e.line_num is None:
                    e.line_num = line_num
                raise
            if self._halted:
                return result
        logger.info("Script ended without a show command")
        return None

    def run(self, lines: Iterable[str]) -> str | None:
        return self.run_numbered(enumerate(lines, start=1))

    def run_script(self, path: Path | str) -> str | None:
        return self.run_numbered(read_script(path))
