"""
round_phase.py
--------------
Lifecycle of a single round.

    NOT_STARTED --launch--> ACTIVE
    ACTIVE --floor, lives left--> NOT_STARTED
    ACTIVE --floor, no lives--> (full reset) NOT_STARTED
    ACTIVE --bricks cleared--> TRANSITIONING --deadline--> NOT_STARTED
"""

from enum import Enum


class RoundPhase(Enum):
    NOT_STARTED = "not_started"     # Ball rides on the paddle
    ACTIVE = "active"               # Ball moves freely
    TRANSITIONING = "transitioning" # Level cleared, frame loop paused
