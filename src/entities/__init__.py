"""
src/entities/__init__.py
------------------------
Entity module exports.

Plain data objects for everything that lives in the arena, plus the round
lifecycle enum. No pygame dependency, so the simulation can be tested
without a display.
"""

from src.entities.ball import Ball
from src.entities.brick import Brick
from src.entities.paddle import Paddle
from src.entities.round_phase import RoundPhase

__all__ = [
    'Ball',
    'Brick',
    'Paddle',
    'RoundPhase',
]
