import random

import pytest

from wordle_round import create_app
from wordle_round.config import TestingConfig
from wordle_round.models import Verdict
from wordle_round.services.game_service import GameService, get_game_service
from wordle_round.services.word_source import WordSource

GUESSES = ["REACT", "SPEED", "ERASE", "APPLE", "LEMON", "TIGER", "SALSA", "EERIE", "LLAMA", "STARE"]

_CODES = {'G': Verdict.CORRECT, 'Y': Verdict.PRESENT, '-': Verdict.ABSENT}


def pattern(code):
    """'GY-' shorthand to a tuple of verdicts."""
    return tuple(_CODES[c] for c in code)


@pytest.fixture
def crane_source():
    """Word source whose only target is CRANE."""
    return WordSource(["CRANE"], GUESSES, rng=random.Random(0))


@pytest.fixture
def game_service(crane_source):
    return GameService(crane_source, max_rounds=6)


@pytest.fixture
def app_and_socketio(tmp_path):
    targets = tmp_path / "targets.txt"
    targets.write_text("crane\n", encoding="utf-8")
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("\n".join(GUESSES) + "\n", encoding="utf-8")

    class CraneConfig(TestingConfig):
        WORD_LIST_FILE = str(targets)
        VALID_GUESSES_FILE = str(guesses)

    return create_app(CraneConfig)


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    client = socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()


@pytest.fixture
def service(app):
    return get_game_service()
