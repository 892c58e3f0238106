"""
Game Engine

Contains the letter evaluation algorithm and the turn state machine.
All functions are pure: they take a GameState and return a new one.
"""

from collections import Counter
from dataclasses import replace
from typing import List, Optional

from ..config.game_settings import MAX_ATTEMPTS
from ..errors import DuplicateGuess, GameAlreadyOver, InvalidGuessLength
from ..models.game import FeedbackStatus, GameState, GameStatus, GuessRecord, LetterFeedback
from ..models.word import WordPick


def get_letter_feedback(secret: str, guess: str) -> List[LetterFeedback]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches consume the letter budget before misplaced letters are
    considered, so a repeated letter is never credited more times than it
    appears in the secret word.

    Raises:
        InvalidGuessLength: If guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise InvalidGuessLength(len(secret), len(guess))

    remaining = Counter(secret)
    result: List[Optional[LetterFeedback]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            result[i] = LetterFeedback(letter, FeedbackStatus.CORRECT)
            remaining[letter] -= 1

    # Second pass: misplaced letters and misses, against what is left
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining[letter] > 0:
            result[i] = LetterFeedback(letter, FeedbackStatus.WRONG_POSITION)
            remaining[letter] -= 1
        else:
            result[i] = LetterFeedback(letter, FeedbackStatus.INCORRECT)

    return [feedback for feedback in result if feedback is not None]


def normalize_guess(guess: str) -> str:
    return guess.strip().upper()


def new_game(pick: WordPick, max_attempts: int = MAX_ATTEMPTS) -> GameState:
    """Creates a fresh active game around the picked word."""
    return GameState(
        word=pick.word.upper(),
        hint=pick.hint,
        attempts_remaining=max_attempts,
        max_attempts=max_attempts,
        notice=pick.notice
    )


def validate_guess(state: GameState, guess: str) -> str:
    """
    Checks a guess against the current state.

    Returns:
        The normalized (stripped, uppercase) guess

    Raises:
        GameAlreadyOver: If the game was already won or lost
        InvalidGuessLength: If the guess length differs from the secret word
        DuplicateGuess: If the guess is already in the history
    """
    if state.game_over:
        raise GameAlreadyOver()

    normalized = normalize_guess(guess)

    if len(normalized) != len(state.word):
        raise InvalidGuessLength(len(state.word), len(normalized))

    if normalized in state.guesses:
        raise DuplicateGuess(normalized)

    return normalized


def apply_guess(state: GameState, guess: str) -> GameState:
    """
    Evaluates one turn.

    A winning guess leaves attempts untouched; any other accepted guess
    costs one attempt, and the game is lost when none remain.
    """
    normalized = validate_guess(state, guess)
    feedback = get_letter_feedback(state.word, normalized)
    history = state.history + (GuessRecord(normalized, tuple(feedback)),)

    if normalized == state.word:
        return replace(
            state,
            history=history,
            status=GameStatus.WON,
            message="Congratulations! You've won!"
        )

    attempts = state.attempts_remaining - 1
    if attempts == 0:
        return replace(
            state,
            history=history,
            attempts_remaining=0,
            status=GameStatus.LOST,
            message=f"Game Over! The word was {state.word}"
        )

    return replace(
        state,
        history=history,
        attempts_remaining=attempts,
        message=f"{attempts} tries remaining"
    )


def reject_guess(state: GameState, message: str) -> GameState:
    """Records a rejection message without touching attempts or history."""
    return replace(state, message=message)


def reset_game(state: GameState, pick: WordPick) -> GameState:
    """Starts over with a new word. Valid from any state, including won and lost."""
    return new_game(pick, state.max_attempts)


def toggle_hint(state: GameState) -> GameState:
    return replace(state, hint_visible=not state.hint_visible)
