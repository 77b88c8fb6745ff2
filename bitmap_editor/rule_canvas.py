"""
Canvas that records paint operations instead of mutating cells.

Every operation appends a rectangular `Rule`. A cell's color is looked up
lazily by scanning the rules newest first, falling back to white. Clearing
appends a full canvas white rule, so older rules are shadowed rather than
forgotten.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Final

from .draw import WHITE, scanline_fill

logger = getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    start_row: int
    end_row: int
    start_column: int
    end_column: int
    color: str

    def contains(self, x: int, y: int) -> bool:
        return (
            self.start_row <= y <= self.end_row
            and self.start_column <= x <= self.end_column
        )


class RuleCanvas:
    def __init__(self, w: int, h: int) -> None:
        self.width: Final = w
        self.height: Final = h
        self.rules: list[Rule] = []

    def add_rule(self, rule: Rule) -> None:
        self.rules.append(rule)

    def color_at(self, x: int, y: int) -> str:
        for rule in reversed(self.rules):
            if rule.contains(x, y):
                return rule.color
        return WHITE

    def set_color(self, x: int, y: int, col: str) -> None:
        self.add_rule(Rule(y, y, x, x, col))

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, col: str) -> None:
        self.add_rule(Rule(y0, y1, x0, x1, col))

    def clear(self) -> None:
        self.add_rule(Rule(0, self.height - 1, 0, self.width - 1, WHITE))

    def flood_fill(self, x: int, y: int, col: str) -> None:
        """Fill the region around (x, y), recorded as one rule per row span.

        The region is found on a resolved snapshot of the canvas, the
        snapshot itself is thrown away afterwards.
        """
        cells = [c for row in self.rows() for c in row]
        spans = scanline_fill(cells, self.width, self.height, x, y, col)
        for left, right, sy in spans:
            self.add_rule(Rule(sy, sy, left, right, col))
        logger.debug(f"Fill at ({x}, {y}) added {len(spans)} rules")

    def rows(self) -> list[list[str]]:
        return [
            [self.color_at(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]
