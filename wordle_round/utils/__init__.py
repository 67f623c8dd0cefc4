"""
Utilities Package

Contains helper functions and the logging module.
"""

from .helpers import get_user_identity, normalize_guess
from .game_logger import game_logger

__all__ = ['get_user_identity', 'normalize_guess', 'game_logger']
