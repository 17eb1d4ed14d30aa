"""
Core services exports.

Provides configuration loading, window/arena management and input routing.
"""

from src.core.services.config_manager import load_config
from src.core.services.display_manager import DisplayManager, arena_size
from src.core.services.input_manager import InputManager

__all__ = [
    # Config
    'load_config',
    # Services
    'DisplayManager',
    'arena_size',
    'InputManager',
]
