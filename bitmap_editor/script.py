from collections.abc import Iterator
from pathlib import Path

from .errors import ScriptDecodeError, ScriptNotFoundError


def read_script(path: Path | str | None) -> Iterator[tuple[int, str]]:
    """Return (line number, line) pairs from a script file, numbered from 1.

    Line terminators are stripped. Lines are read lazily so that nothing
    after a show command has to be read at all.
    """
    if path is None or not Path(path).is_file():
        raise ScriptNotFoundError("Please provide correct file")
    return _read_lines(Path(path))


def _read_lines(path: Path) -> Iterator[tuple[int, str]]:
    # Decoded per line so a bad byte is reported with its line number
    with path.open("rb") as f:
        for line_num, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ScriptDecodeError("Script is not valid UTF-8", line_num) from e
            yield line_num, line.rstrip("\r\n")
