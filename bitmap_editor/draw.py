"""
Bitmap drawing utilities using a simple 1D cell buffer.

`PixelCanvas` treats `array` as a flat, mutable 1D buffer representing a
`w` by `h` bitmap in row-major order. Cells are addressed at index
`y * w + x` and hold single letter colors.
"""

from collections.abc import MutableSequence
from typing import Final

WHITE: Final = "O"

Span = tuple[int, int, int]
"""A filled horizontal run as (left, right, y), both ends inclusive."""


def scanline_fill(
    cells: MutableSequence[str], w: int, h: int, x: int, y: int, col: str
) -> list[Span]:
    """Flood-fill `cells` in place and return the spans that were painted.

    - Fills the 4-connected region containing (x, y) with color `col`
    - Only fills cells that have the color found at (x, y)
    - Uses a stack of seeds instead of recursion, so region size never
      affects call depth
    """

    target_col = cells[y * w + x]
    if col == target_col:
        return []

    spans: list[Span] = []
    stack: list[tuple[int, int]] = [(x, y)]

    while stack:
        cx, cy = stack.pop()
        row = cy * w

        if cells[row + cx] != target_col:
            continue

        # Find left side, filling along the way
        left = cx
        while left >= 0 and cells[row + left] == target_col:
            cells[row + left] = col
            left -= 1

        left += 1

        # Find right side, filling along the way
        right = cx + 1
        while right < w and cells[row + right] == target_col:
            cells[row + right] = col
            right += 1

        right -= 1
        spans.append((left, right, cy))

        # Add seeds above and below to stack
        for i in range(left, right + 1):
            if cy - 1 >= 0 and cells[row - w + i] == target_col:
                stack.append((i, cy - 1))

            if cy + 1 < h and cells[row + w + i] == target_col:
                stack.append((i, cy + 1))

    return spans


class PixelCanvas:
    """A minimal bitmap canvas backed by a 1D cell buffer.

    - `array` is modified in-place.
    - Coordinates are 0-based, with origin at top-left.
    - No bounds checking is done here, callers pass valid indices.
    """

    def __init__(self, w: int, h: int) -> None:
        self.array: Final = [WHITE] * w * h
        self.width: Final = w
        self.height: Final = h

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x

    def color_at(self, x: int, y: int) -> str:
        return self.array[self._index(x, y)]

    def set_color(self, x: int, y: int, col: str) -> None:
        self.array[self._index(x, y)] = col

    def clear(self) -> None:
        for i in range(len(self.array)):
            self.array[i] = WHITE

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, col: str) -> None:
        """Paint the inclusive rectangle from (x0, y0) to (x1, y1)."""
        for y in range(y0, y1 + 1):
            start = self._index(x0, y)
            self.array[start : start + x1 - x0 + 1] = [col] * (x1 - x0 + 1)

    def flood_fill(self, x: int, y: int, col: str) -> None:
        _ = scanline_fill(self.array, self.width, self.height, x, y, col)

    def rows(self) -> list[list[str]]:
        w = self.width
        return [self.array[y * w : (y + 1) * w] for y in range(self.height)]
