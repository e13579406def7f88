"""Laser Strike - 2D arcade shooter engine"""

from .engine import Engine, GameCallbacks, GameState
from .errors import ConfigurationError, LaserStrikeError

__all__ = ['Engine', 'GameCallbacks', 'GameState', 'ConfigurationError', 'LaserStrikeError']
