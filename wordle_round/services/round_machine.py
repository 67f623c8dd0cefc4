"""
Round State Machine

Pure transitions over ``RoundState``: start, submit a guess, reset. Nothing
here keeps state between calls; the caller owns the current RoundState.
"""

from dataclasses import replace
from typing import Container, Dict, Optional, Tuple

from ..config.game_settings import ALPHABET, MAX_ROUNDS, WORD_LENGTH, is_word
from ..models.errors import InvalidLength, NotInWordList, RoundFinished
from ..models.game import LETTER_STATUS_RANK, UNUSED, GuessResult, RoundState, RoundStatus
from .evaluator import evaluate


def start(target: str, max_attempts: int = MAX_ROUNDS) -> RoundState:
    """
    Begin a round with an empty history.

    Raises:
        ValueError: If target is not a valid word or max_attempts < 1
    """
    if not is_word(target):
        raise ValueError(f"Target {target!r} is not {WORD_LENGTH} uppercase letters")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
    return RoundState(target_word=target, max_attempts=max_attempts)


def submit_guess(state: RoundState,
                 guess: str,
                 valid_guesses: Optional[Container[str]] = None) -> Tuple[RoundState, GuessResult]:
    """
    Score a guess and advance the round.

    Args:
        state: Current round
        guess: Uppercase guess
        valid_guesses: Dictionary to check membership against, if any

    Returns:
        Tuple of (new state, result for this guess)

    Raises:
        RoundFinished: If the round is already WON or LOST
        InvalidLength: If the guess is not WORD_LENGTH letters
        NotInWordList: If valid_guesses is given and lacks the guess
    """
    if state.is_over:
        raise RoundFinished(guess)
    if len(guess) != WORD_LENGTH:
        raise InvalidLength(guess)
    if valid_guesses is not None and guess not in valid_guesses:
        raise NotInWordList(guess)

    result = evaluate(guess, state.target_word)
    history = state.history + (result,)

    if guess == state.target_word:
        status = RoundStatus.WON
    elif len(history) >= state.max_attempts:
        status = RoundStatus.LOST
    else:
        status = RoundStatus.IN_PROGRESS

    return replace(state, history=history, status=status), result


def reset(word_source, max_attempts: int = MAX_ROUNDS) -> RoundState:
    """Discard the current round and start over with a freshly drawn target."""
    return start(word_source.choose_target(), max_attempts)


def update_letter_status(letter_status: Dict[str, str], result: GuessResult) -> Dict[str, str]:
    """
    Fold one result into a keyboard status map.

    Status only ever moves up CORRECT > PRESENT > ABSENT > UNUSED.
    Returns a new dict; the input is not modified.
    """
    updated = dict(letter_status)
    for letter, verdict in zip(result.guess, result.verdicts):
        current = updated.get(letter, UNUSED)
        if LETTER_STATUS_RANK[verdict.value] > LETTER_STATUS_RANK[current]:
            updated[letter] = verdict.value
    return updated


def letter_status(state: RoundState) -> Dict[str, str]:
    """Best-known status of every letter A-Z across the round history."""
    status = {letter: UNUSED for letter in ALPHABET}
    for result in state.history:
        status = update_letter_status(status, result)
    return status
