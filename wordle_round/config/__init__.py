"""
Configuration Package

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, DEFAULT_WORD_FILE, MAX_ROUNDS, WORD_LENGTH,
    is_word, validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'DEFAULT_WORD_FILE', 'MAX_ROUNDS', 'WORD_LENGTH',
    'is_word', 'validate_word_list_integrity',
]
