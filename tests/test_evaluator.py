from collections import Counter
from itertools import product

import pytest

from conftest import pattern
from wordle_round.models import GuessResult, Verdict
from wordle_round.services.evaluator import evaluate

WORDS = ["CRANE", "REACT", "ERASE", "SPEED", "LEVEL", "LEMON", "SCOOP", "EERIE", "LLAMA", "APPLE"]


@pytest.mark.parametrize("guess,target,expected", [
    ("REACT", "CRANE", "YYGY-"),
    ("SPEED", "ERASE", "Y-YY-"),
    ("BELLE", "LEVEL", "-GYYY"),
    ("LEMON", "LEVEL", "GG---"),
    ("COOLS", "SCOOP", "YYG-Y"),
    ("RAISE", "CRANE", "YY--G"),
    ("STARE", "CRANE", "--GYG"),
    ("EERIE", "CRANE", "--Y-G"),
    ("LLAMA", "LEMON", "G--Y-"),
    ("SALSA", "CRANE", "-Y---"),
])
def test_evaluate_golden(guess, target, expected):
    result = evaluate(guess, target)
    assert result.guess == guess
    assert result.verdicts == pattern(expected)


@pytest.mark.parametrize("word", WORDS)
def test_identical_guess_is_all_correct(word):
    result = evaluate(word, word)
    assert result.verdicts == (Verdict.CORRECT,) * 5
    assert result.is_win


def test_disjoint_words_are_all_absent():
    result = evaluate("FUZZY", "CRANE")
    assert result.verdicts == (Verdict.ABSENT,) * 5
    assert not result.is_win


def test_letter_counts_are_conserved():
    for guess, target in product(WORDS, repeat=2):
        result = evaluate(guess, target)
        credited = Counter(
            letter for letter, verdict in zip(guess, result.verdicts)
            if verdict is not Verdict.ABSENT
        )
        for letter, count in credited.items():
            assert count <= target.count(letter)
            assert count <= guess.count(letter)


def test_scoring_is_order_sensitive():
    assert evaluate("SPEED", "ERASE") != evaluate("ERASE", "SPEED")
    assert evaluate("ERASE", "SPEED").verdicts == pattern("Y--YY")


def test_correct_takes_priority_over_earlier_present():
    # The E at index 4 is an exact match, so the leading Es get nothing.
    result = evaluate("EERIE", "CRANE")
    assert result.verdicts[4] is Verdict.CORRECT
    assert result.verdicts[:2] == (Verdict.ABSENT, Verdict.ABSENT)


def test_result_is_immutable():
    result = evaluate("REACT", "CRANE")
    assert isinstance(result, GuessResult)
    with pytest.raises(AttributeError):
        result.guess = "CRANE"


def test_as_pairs_and_to_dict():
    result = evaluate("REACT", "CRANE")
    assert result.as_pairs()[2] == ("A", "CORRECT")
    assert result.to_dict() == {
        'guess': "REACT",
        'verdicts': ["PRESENT", "PRESENT", "CORRECT", "PRESENT", "ABSENT"],
        'is_win': False,
    }


@pytest.mark.parametrize("guess,target", [
    ("CRAN", "CRANE"),
    ("CRANES", "CRANE"),
    ("crane", "CRANE"),
    ("CRANE", "CR4NE"),
])
def test_malformed_words_are_rejected(guess, target):
    with pytest.raises(ValueError):
        evaluate(guess, target)
