"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class constants
with no initialization overhead; the simulation and the pygame host are
imported from their own modules.
"""

from src.core.runtime.game_settings import (
    Ball,
    Bricks,
    Debug,
    Display,
    Hud,
    Paddle,
    Rules,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Hud',
    # Gameplay
    'Paddle',
    'Ball',
    'Bricks',
    'Rules',
    # Debug
    'Debug',
]
