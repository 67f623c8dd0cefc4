"""
Error Types

Validation outcomes raised by the round state machine and lookup errors
raised by the game service. All of them are recoverable: the caller shows
``message`` and lets the player try again.
"""

from typing import Optional

from ..config.game_settings import WORD_LENGTH


class GuessValidationError(ValueError):
    """Base class for a rejected guess. The round state is left untouched."""

    code = "INVALID_GUESS"
    default_message = "Invalid guess"

    def __init__(self, guess: Optional[str] = None, message: Optional[str] = None):
        self.guess = guess
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidLength(GuessValidationError):
    """Guess is not exactly WORD_LENGTH letters."""
    code = "INVALID_LENGTH"
    default_message = f"Guess must be exactly {WORD_LENGTH} letters"


class NotInWordList(GuessValidationError):
    """Guess failed the dictionary membership check."""
    code = "NOT_IN_WORD_LIST"
    default_message = "Not in word list"


class RoundFinished(GuessValidationError):
    """Submission after the round reached WON or LOST."""
    code = "ROUND_FINISHED"
    default_message = "Game is already over"


class GameNotFoundError(LookupError):
    """No live round is stored under the given game id."""

    code = "GAME_NOT_FOUND"

    def __init__(self, game_id: str):
        self.game_id = game_id
        self.message = "Game not found"
        super().__init__(f"{self.message}: {game_id}")
