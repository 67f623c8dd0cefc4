"""
Services Package

Contains the evaluator, the round state machine and the session layer.
"""

from .evaluator import evaluate
from .round_machine import letter_status, reset, start, submit_guess, update_letter_status
from .word_source import WordSource, load_words
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'evaluate',
    'letter_status', 'reset', 'start', 'submit_guess', 'update_letter_status',
    'WordSource', 'load_words',
    'GameService', 'get_game_service', 'initialize_game_service',
]
