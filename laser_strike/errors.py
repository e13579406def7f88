"""
Exceptions raised by the engine
"""


class LaserStrikeError(Exception):
    """Base class for all engine errors"""


class ConfigurationError(LaserStrikeError):
    """Engine was constructed with an unusable surface or options"""
