#!/usr/bin/env python
import logging
import sys
from pathlib import Path
from typing import cast, override

import jsonargparse
from lagom import Container

from .draw import PixelCanvas
from .editor_config import EditorConfig, Strategy
from .engine import CanvasFactory, DrawingEngine
from .errors import BitmapError
from .interpreter import Interpreter
from .rule_canvas import RuleCanvas

logger = logging.getLogger(__name__)

CANVAS_STRATEGIES: dict[Strategy, CanvasFactory] = {
    "matrix": PixelCanvas,
    "rules": RuleCanvas,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class IndentMultiline(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord):
        s = super().format(record)
        head, *rest = s.splitlines()
        if rest:
            rest = ["    " + line for line in rest]
            return "\n".join([head, *rest])
        return s


def setup_logging(verbose: bool, log_file: Path | None) -> list[logging.Handler]:
    """Attach stderr (and optionally file) handlers to the root logger.

    Returns the added handlers so the caller can detach them again.
    """
    formatter = IndentMultiline(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return handlers


def make_container(config: EditorConfig) -> Container:
    container = Container()
    container[EditorConfig] = config
    container[DrawingEngine] = lambda c: DrawingEngine(
        CANVAS_STRATEGIES[c[EditorConfig].strategy]
    )
    container[Interpreter] = lambda c: Interpreter(c[DrawingEngine])
    return container


def main(args: list[str] | None = None) -> None:
    jsonargparse.set_parsing_settings(docstring_parse_attribute_docstrings=True)

    config = cast(
        "EditorConfig",
        jsonargparse.auto_cli(EditorConfig, args=args, as_positional=True),  # pyright: ignore[reportUnknownMemberType]
    )

    root = logging.getLogger()
    old_level = root.level
    handlers = setup_logging(config.verbose, config.log_file)

    try:
        interpreter = make_container(config)[Interpreter]
        logger.info(f"Running {config.script_file} ({config.strategy})")
        result = interpreter.run_script(config.script_file)
    except BitmapError as e:
        logger.debug(f"Run aborted: {e}")
        sys.exit(f"error: {e}")
    finally:
        for handler in handlers:
            root.removeHandler(handler)
            handler.close()
        root.setLevel(old_level)

    if result is None:
        logger.info("Nothing to show")
        return
    print(result)


if __name__ == "__main__":
    main()
