"""
Game Configuration Constants Module

All round parameters are centralized here. The word list itself is not
loaded at import time; see ``wordle_round.services.word_source``.
"""

import os
import string
from typing import Final, List

WORD_LENGTH: Final[int] = 5
"""Number of letters in every target word and guess."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = string.ascii_uppercase

DEFAULT_WORD_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.txt'
)


def is_word(word: str) -> bool:
    """True when ``word`` is exactly WORD_LENGTH uppercase ASCII letters."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all(char in ALPHABET for char in word)
    )


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not is_word(word):
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True

