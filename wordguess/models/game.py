"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class FeedbackStatus(Enum):
    """Per-letter evaluation of a guess against the secret word."""
    CORRECT = "correct"
    WRONG_POSITION = "wrong-position"
    INCORRECT = "incorrect"


class GameStatus(Enum):
    """Turn state of a single game."""
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class LetterFeedback:
    letter: str
    status: FeedbackStatus


@dataclass(frozen=True)
class GuessRecord:
    """A submitted guess and its feedback, one entry per letter position."""
    guess: str
    feedback: Tuple[LetterFeedback, ...]


@dataclass(frozen=True)
class GameState:
    """
    Complete state of one game.

    Instances are never mutated; every transition in the engine returns a
    new state.
    """
    word: str
    hint: Optional[str]
    attempts_remaining: int
    max_attempts: int
    history: Tuple[GuessRecord, ...] = ()
    status: GameStatus = GameStatus.ACTIVE
    message: str = ""
    hint_visible: bool = False
    notice: Optional[str] = None  # Set when the fallback word is in play

    @property
    def game_over(self) -> bool:
        return self.status is not GameStatus.ACTIVE

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(record.guess for record in self.history)
