"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .errors import GameNotFoundError, GuessValidationError, InvalidLength, NotInWordList, RoundFinished
from .game import GameState, GuessResult, LETTER_STATUS_RANK, RoundState, RoundStatus, UNUSED, Verdict

__all__ = [
    'GameState', 'GuessResult', 'LETTER_STATUS_RANK', 'RoundState', 'RoundStatus', 'UNUSED', 'Verdict',
    'GameNotFoundError', 'GuessValidationError', 'InvalidLength', 'NotInWordList', 'RoundFinished',
]
