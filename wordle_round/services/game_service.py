"""
Game Service

Keeps the live round for each game id and drives the round state machine.
"""

import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..models.errors import GameNotFoundError
from ..models.game import GameState, GuessResult, RoundState, RoundStatus
from ..utils.game_logger import game_logger
from ..utils.helpers import normalize_guess
from . import round_machine
from .word_source import WordSource


class GameService:
    """
    Session manager for single-player rounds.

    This class handles:
    - Round session management with unique game IDs
    - Target selection from the word source
    - Guess normalization and submission
    - Client views that hide the answer until the round is over

    Calls are serialized with a lock; each RoundState is replaced, never
    mutated.
    """

    def __init__(self, word_source: WordSource, max_rounds: int = MAX_ROUNDS):
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {max_rounds}")
        self.word_source = word_source
        self.max_rounds = max_rounds
        self.games: Dict[str, RoundState] = {}
        self._lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new round with a randomly selected target.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        state = round_machine.reset(self.word_source, self.max_rounds)
        with self._lock:
            self.games[game_id] = state
        game_logger.logger.debug(f"Round created for game {game_id}")
        return game_id

    def get_round(self, game_id: str) -> Optional[RoundState]:
        """Raw RoundState for a game, or None if unknown."""
        return self.games.get(game_id)

    def _require_round(self, game_id: str) -> RoundState:
        state = self.games.get(game_id)
        if state is None:
            raise GameNotFoundError(game_id)
        return state

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        state = self.games.get(game_id)
        if state is None:
            return None
        return self.to_game_state(game_id, state)

    @staticmethod
    def to_game_state(game_id: str, state: RoundState) -> GameState:
        return GameState(
            game_id=game_id,
            current_round=state.attempts_used,
            max_rounds=state.max_attempts,
            status=state.status.value,
            game_over=state.is_over,
            won=state.status is RoundStatus.WON,
            guesses=state.guesses,
            guess_results=[result.as_pairs() for result in state.history],
            letter_status=round_machine.letter_status(state),
            attempts_remaining=state.attempts_remaining,
            answer=state.revealed_word,
        )

    def make_guess(self, game_id: str, guess) -> Tuple[GameState, GuessResult]:
        """
        Processes a guess and updates the round.

        Args:
            game_id: Unique game identifier
            guess: Raw player input; trimmed and uppercased here

        Returns:
            Tuple of (updated GameState, GuessResult)

        Raises:
            GameNotFoundError: If the game id is unknown
            GuessValidationError: If the guess is rejected; the round is unchanged
        """
        normalized_guess = normalize_guess(guess)

        with self._lock:
            state = self._require_round(game_id)
            new_state, result = round_machine.submit_guess(
                state, normalized_guess or "", self.word_source.valid_guesses
            )
            self.games[game_id] = new_state

        return self.to_game_state(game_id, new_state), result

    def reset_game(self, game_id: str) -> GameState:
        """Replaces the round under ``game_id`` with a fresh one."""
        with self._lock:
            self._require_round(game_id)
            state = round_machine.reset(self.word_source, self.max_rounds)
            self.games[game_id] = state
        return self.to_game_state(game_id, state)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    @property
    def active_game_count(self) -> int:
        return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: WordSource, max_rounds: int = MAX_ROUNDS) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source, max_rounds)
    return _game_service
