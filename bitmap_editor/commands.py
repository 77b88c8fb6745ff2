"""Command grammar for bitmap scripts.

Each script line is a single command letter optionally followed by
whitespace separated arguments. Lines are validated against a fixed
pattern per command before being turned into typed command values, so
nothing downstream has to deal with raw text.
"""

import re
from dataclasses import dataclass
from typing import Final

from .errors import EmptyLineError, InvalidArgumentError, UnknownCommandError

_NUM = r"[1-9][0-9]*"
_COLOR = r"[A-Z]"

# Commands mapped to their argument pattern, None meaning "no arguments"
CMD_ARGS_REGEXES: Final[dict[str, re.Pattern[str] | None]] = {
    "I": re.compile(rf"{_NUM}\s{_NUM}"),
    "S": None,
    "C": None,
    "L": re.compile(rf"{_NUM}\s{_NUM}\s{_COLOR}"),
    "V": re.compile(rf"{_NUM}\s{_NUM}\s{_NUM}\s{_COLOR}"),
    "H": re.compile(rf"{_NUM}\s{_NUM}\s{_NUM}\s{_COLOR}"),
    "F": re.compile(rf"{_NUM}\s{_NUM}\s{_COLOR}"),
}


@dataclass(frozen=True)
class CreateImage:
    width: int
    height: int


@dataclass(frozen=True)
class ShowImage:
    pass


@dataclass(frozen=True)
class ClearImage:
    pass


@dataclass(frozen=True)
class SetPixel:
    column: int
    row: int
    color: str


@dataclass(frozen=True)
class VerticalSegment:
    column: int
    start_row: int
    end_row: int
    color: str


@dataclass(frozen=True)
class HorizontalSegment:
    start_column: int
    end_column: int
    row: int
    color: str


@dataclass(frozen=True)
class FloodFill:
    column: int
    row: int
    color: str


Command = (
    CreateImage
    | ShowImage
    | ClearImage
    | SetPixel
    | VerticalSegment
    | HorizontalSegment
    | FloodFill
)


def split_line(line: str, line_num: int | None = None) -> tuple[str, str | None]:
    """Split a raw line into its command letter and argument string.

    The argument string is None when the line holds only a command.
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        raise EmptyLineError("Empty line in file", line_num)

    parts = re.split(r"\s", line, maxsplit=1)
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]


def validate(cmd: str, args: str | None, line_num: int | None = None) -> bool:
    """Check that `args` has exactly the shape `cmd` requires."""
    if cmd not in CMD_ARGS_REGEXES:
        accepted = ", ".join(CMD_ARGS_REGEXES)
        raise UnknownCommandError(
            f"Unrecognised command `{cmd}` - accepts {accepted}", line_num
        )

    regex = CMD_ARGS_REGEXES[cmd]
    if regex is None:
        valid = args is None
    else:
        valid = args is not None and regex.fullmatch(args) is not None
    if not valid:
        raise InvalidArgumentError(
            f"Invalid arguments for `{cmd}` command", line_num
        )
    return True


def parse_line(line: str, line_num: int | None = None) -> Command:
    cmd, args = split_line(line, line_num)
    _ = validate(cmd, args, line_num)
    fields = args.split() if args else []

    match cmd:
        case "I":
            return CreateImage(int(fields[0]), int(fields[1]))
        case "S":
            return ShowImage()
        case "C":
            return ClearImage()
        case "L":
            return SetPixel(int(fields[0]), int(fields[1]), fields[2])
        case "V":
            return VerticalSegment(
                int(fields[0]), int(fields[1]), int(fields[2]), fields[3]
            )
        case "H":
            return HorizontalSegment(
                int(fields[0]), int(fields[1]), int(fields[2]), fields[3]
            )
        case "F":
            return FloodFill(int(fields[0]), int(fields[1]), fields[2])
        case _:
            raise UnknownCommandError(f"Unrecognised command `{cmd}`", line_num)
