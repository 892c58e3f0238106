"""
Shared fixtures for the word guessing server tests.
"""

import os
import random
import tempfile
from pathlib import Path

# Must be set before wordguess is imported: the game logger opens its file on import
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "wordguess-test-logs"))

import pytest

from wordguess import create_app
from wordguess.config import TestingConfig
from wordguess.models.word import WordPick
from wordguess.services import game_service as game_service_module
from wordguess.services.game_service import initialize_game_service
from wordguess.services.word_source import StaticWordSource, WordSource


class FixedWordSource(WordSource):
    """Hands out the given picks in order, repeating the last one."""

    name = "fixed"

    def __init__(self, *picks):
        self.picks = list(picks)
        self.calls = 0

    def generate(self):
        pick = self.picks[min(self.calls, len(self.picks) - 1)]
        self.calls += 1
        return pick


@pytest.fixture
def fixed_source():
    return FixedWordSource(
        WordPick(word="GRAPE", hint="Grows in bunches on a vine"),
        WordPick(word="LEVEL", hint="Reads the same both ways"),
    )


@pytest.fixture
def seeded_static_source():
    return StaticWordSource(rng=random.Random(1234))


@pytest.fixture
def game_service(fixed_source):
    service = initialize_game_service(fixed_source)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(game_service):
    app = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
