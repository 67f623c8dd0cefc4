"""
Word Source

Supplies target words and the valid-guess dictionary, and draws targets
uniformly at random.
"""

import json
import os
import random
from typing import FrozenSet, Iterable, List, Optional

from ..config.game_settings import WORD_LENGTH, is_word, validate_word_list_integrity
from ..utils.game_logger import game_logger


def _normalize(token: str) -> str:
    return token.replace('\ufeff', '').strip().upper()


def load_words(path: str) -> List[str]:
    """
    Load a word list from disk.

    ``.json`` files must hold an array of words; anything else is read as
    one word per line. Tokens are trimmed and uppercased, and only
    WORD_LENGTH alphabetic tokens are kept (first occurrence wins).

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file yields no usable words
    """
    with open(path, 'r', encoding='utf-8') as f:
        if path.lower().endswith('.json'):
            raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError("JSON file must contain an array of words")
        else:
            raw = f.read().splitlines()

    tokens = [_normalize(str(token)) for token in raw]
    words = [word for word in tokens if len(word) == WORD_LENGTH and word.isalpha() and word.isascii()]
    words = list(dict.fromkeys(words))

    skipped = len([token for token in tokens if token]) - len(words)
    if skipped:
        game_logger.logger.warning(f"Skipped {skipped} unusable entries in {os.path.basename(path)}")

    if not words:
        raise ValueError(f"Word list cannot be empty: {path}")

    game_logger.logger.info(f"Loaded {len(words)} words from {path}")
    return words


class WordSource:
    """
    Target words plus the set of words accepted as guesses.

    Every target word is also a valid guess. Extra guess words that are not
    WORD_LENGTH uppercase letters are dropped.
    """

    def __init__(self,
                 targets: Iterable[str],
                 valid_guesses: Optional[Iterable[str]] = None,
                 rng: Optional[random.Random] = None):
        self.targets = tuple(targets)
        validate_word_list_integrity(list(self.targets))
        extra = list(valid_guesses or ())
        guesses = [word for word in extra if is_word(word)]
        if len(guesses) != len(extra):
            game_logger.logger.warning(f"Dropped {len(extra) - len(guesses)} malformed valid-guess entries")
        self.valid_guesses: FrozenSet[str] = frozenset(self.targets).union(guesses)
        self._rng = rng or random.Random()

    @classmethod
    def from_files(cls, word_file: str, guess_file: Optional[str] = None, seed: Optional[int] = None):
        targets = load_words(word_file)
        guesses = load_words(guess_file) if guess_file else None
        return cls(targets, guesses, random.Random(seed))

    def choose_target(self) -> str:
        return self._rng.choice(self.targets)

    def is_valid_guess(self, word: str) -> bool:
        return word in self.valid_guesses

    def __contains__(self, word) -> bool:
        return self.is_valid_guess(word)

    def __len__(self) -> int:
        return len(self.targets)
