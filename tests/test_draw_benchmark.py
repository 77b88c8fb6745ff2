import time

import pytest

from bitmap_editor.draw import PixelCanvas
from bitmap_editor.rule_canvas import RuleCanvas


def _time_it(fn, iterations: int = 1) -> float:
    """Return total seconds for running fn() `iterations` times."""
    for _ in range(min(3, iterations)):
        fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    end = time.perf_counter()
    return end - start


def _draw_walls(canvas: PixelCanvas | RuleCanvas, spacing: int, wall: str):
    w, h = canvas.width, canvas.height
    for x in range(0, w, spacing):
        canvas.fill_rect(x, 0, x, h - 1, wall)
    for y in range(0, h, spacing):
        canvas.fill_rect(0, y, w - 1, y, wall)


def _seeds(w: int, h: int, spacing: int) -> list[tuple[int, int]]:
    seeds = [
        (cx, cy)
        for cy in range(spacing // 2, h, spacing)
        for cx in range(spacing // 2, w, spacing)
    ]
    # Sample a subset to keep runtime modest
    return seeds[0:64]


@pytest.mark.slow
def test_bench_clear():
    w = h = 512
    canvas = PixelCanvas(w, h)

    iterations = 50
    total = _time_it(canvas.clear, iterations)
    per_op_us = (total / iterations) * 1e6
    print(f"clear() total: {total:.4f}s, avg: {per_op_us:.2f} µs/op over {iterations} iters")


@pytest.mark.slow
def test_bench_flood_fill():
    # Grid of cells separated by 1px walls, then fill distinct cells.
    w = h = 256
    spacing = 16
    canvas = PixelCanvas(w, h)
    _draw_walls(canvas, spacing, "B")
    seeds = _seeds(w, h, spacing)

    def run_once():
        # Alternate fill colors so the same-color early return never kicks in
        nonlocal col
        for sx, sy in seeds:
            canvas.flood_fill(sx, sy, col)
        col = "R" if col == "G" else "G"

    col = "R"
    iterations = 5
    total = _time_it(run_once, iterations)
    ops = iterations * len(seeds)
    per_fill_us = (total / ops) * 1e6
    print(f"flood_fill() total: {total:.4f}s, fills: {ops}, avg: {per_fill_us:.2f} µs/fill")


@pytest.mark.slow
def test_bench_rule_canvas_render():
    w = h = 64
    spacing = 8
    canvas = RuleCanvas(w, h)
    _draw_walls(canvas, spacing, "B")
    for sx, sy in _seeds(w, h, spacing)[:8]:
        canvas.flood_fill(sx, sy, "R")

    iterations = 5
    total = _time_it(canvas.rows, iterations)
    per_render_ms = (total / iterations) * 1e3
    print(
        f"rows() with {len(canvas.rules)} rules: {total:.4f}s, avg: {per_render_ms:.2f} ms/render"
    )
