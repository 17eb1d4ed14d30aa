"""
Level system exports.

Provides brick grid generation and level progression.
"""

from src.systems.level.brick_layout import build_bricks, row_color, rows_for_level
from src.systems.level.level_manager import LevelManager

__all__ = [
    'LevelManager',
    'build_bricks',
    'row_color',
    'rows_for_level',
]
