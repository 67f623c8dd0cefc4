"""
Guess Evaluator

Scores one guess against one target word.
"""

from collections import Counter
from typing import List, Optional

from ..config.game_settings import WORD_LENGTH, is_word
from ..models.game import GuessResult, Verdict


def evaluate(guess: str, target: str) -> GuessResult:
    """
    Score ``guess`` against ``target`` with standard duplicate-letter rules.

    Exact matches are resolved first and consume their letter, then the
    remaining positions are scored left to right: a letter is PRESENT only
    while the target still has an unconsumed copy of it, otherwise ABSENT.
    A single pass would over-credit repeated letters (SPEED vs ERASE).

    Args:
        guess: WORD_LENGTH uppercase letters
        target: WORD_LENGTH uppercase letters

    Returns:
        GuessResult with one Verdict per position

    Raises:
        ValueError: If either word is not WORD_LENGTH uppercase letters
    """
    if not is_word(guess):
        raise ValueError(f"Guess {guess!r} is not {WORD_LENGTH} uppercase letters")
    if not is_word(target):
        raise ValueError(f"Target {target!r} is not {WORD_LENGTH} uppercase letters")

    remaining = Counter(target)
    verdicts: List[Optional[Verdict]] = [None] * WORD_LENGTH

    # First pass: exact position matches
    for i, (guessed, expected) in enumerate(zip(guess, target)):
        if guessed == expected:
            verdicts[i] = Verdict.CORRECT
            remaining[guessed] -= 1

    # Second pass: present letters and misses, leftmost first
    for i, letter in enumerate(guess):
        if verdicts[i] is not None:
            continue
        if remaining[letter] > 0:
            verdicts[i] = Verdict.PRESENT
            remaining[letter] -= 1
        else:
            verdicts[i] = Verdict.ABSENT

    return GuessResult(guess=guess, verdicts=tuple(verdicts))
