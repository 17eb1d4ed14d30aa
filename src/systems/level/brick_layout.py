"""
brick_layout.py
---------------
Builds the brick grid for a level.

The grid is `rows x Bricks.COLS`, centered horizontally, starting
Bricks.TOP_OFFSET pixels below the top edge. Each row gets its own hue so
the colors sweep once around the wheel regardless of row count.
"""

import colorsys

from src.core.runtime.game_settings import Bricks
from src.entities import Brick


def row_color(row: int, rows: int) -> tuple:
    """RGB color for a row: hue = row * 360 / rows at fixed saturation/lightness."""
    hue = (row / rows) % 1.0
    r, g, b = colorsys.hls_to_rgb(hue, Bricks.LIGHTNESS, Bricks.SATURATION)
    return round(r * 255), round(g * 255), round(b * 255)


def build_bricks(arena_width: float, rows: int, brick_width: float,
                 brick_height: float, padding: float, cols: int = Bricks.COLS) -> list:
    """
    Lay out a fresh grid of bricks.

    Args:
        arena_width: Current arena width in pixels
        rows: Number of brick rows for this level
        brick_width: Brick width in pixels
        brick_height: Brick height in pixels
        padding: Gap between bricks (and above the first row) in pixels
        cols: Bricks per row

    Returns:
        list[Brick]: Row-major list, top-left brick first
    """
    pitch_x = brick_width + padding
    pitch_y = brick_height + padding
    start_x = (arena_width - cols * pitch_x) / 2

    bricks = []
    for row in range(rows):
        color = row_color(row, rows)
        y = row * pitch_y + padding + Bricks.TOP_OFFSET
        for col in range(cols):
            bricks.append(Brick(
                x=start_x + col * pitch_x,
                y=y,
                width=brick_width,
                height=brick_height,
                color=color,
            ))
    return bricks


def rows_for_level(level: int) -> int:
    """Target row count once `level` is reached, capped at Bricks.MAX_ROWS."""
    return min(Bricks.INITIAL_ROWS + level, Bricks.MAX_ROWS)
