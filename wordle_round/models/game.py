"""
Game Data Models

Contains all round-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS


class Verdict(Enum):
    """Per-position evaluation of a guessed letter."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class RoundStatus(Enum):
    """Lifecycle of a single round. WON and LOST are terminal."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


# Keyboard status for a letter that has not been guessed yet
UNUSED = "UNUSED"

# Best-known keyboard status ordering, higher wins
LETTER_STATUS_RANK: Dict[str, int] = {
    UNUSED: 0,
    Verdict.ABSENT.value: 1,
    Verdict.PRESENT.value: 2,
    Verdict.CORRECT.value: 3,
}


@dataclass(frozen=True)
class GuessResult:
    """A scored guess: the guessed word plus one verdict per position."""
    guess: str
    verdicts: Tuple[Verdict, ...]

    @property
    def is_win(self) -> bool:
        return all(verdict is Verdict.CORRECT for verdict in self.verdicts)

    def as_pairs(self) -> List[Tuple[str, str]]:
        """(letter, verdict) pairs, JSON friendly."""
        return [(letter, verdict.value) for letter, verdict in zip(self.guess, self.verdicts)]

    def to_dict(self) -> Dict:
        return {
            'guess': self.guess,
            'verdicts': [verdict.value for verdict in self.verdicts],
            'is_win': self.is_win,
        }


@dataclass(frozen=True)
class RoundState:
    """
    Immutable snapshot of one round.

    Transitions never mutate a RoundState; ``round_machine.submit_guess``
    returns a new value built with ``dataclasses.replace``.
    """
    target_word: str = field(repr=False)
    max_attempts: int = MAX_ROUNDS
    history: Tuple[GuessResult, ...] = ()
    status: RoundStatus = RoundStatus.IN_PROGRESS

    @property
    def attempts_used(self) -> int:
        return len(self.history)

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - len(self.history)

    @property
    def is_over(self) -> bool:
        return self.status is not RoundStatus.IN_PROGRESS

    @property
    def guesses(self) -> List[str]:
        return [result.guess for result in self.history]

    @property
    def revealed_word(self) -> Optional[str]:
        """The target word, only once the round has finished."""
        return self.target_word if self.is_over else None


@dataclass
class GameState:
    """Client-facing view of a round (answer hidden until it is over)."""
    game_id: str
    current_round: int
    max_rounds: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Verdicts as strings for JSON serialization
    letter_status: Dict[str, str]
    attempts_remaining: int
    answer: Optional[str] = None  # Only included when round is over
