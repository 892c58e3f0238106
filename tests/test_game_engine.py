"""
Unit tests for the turn state machine.
"""

import pytest

from wordguess.errors import DuplicateGuess, GameAlreadyOver, InvalidGuessLength
from wordguess.models.game import FeedbackStatus, GameStatus
from wordguess.models.word import WordPick
from wordguess.services import game_engine


@pytest.fixture
def grape_game():
    return game_engine.new_game(WordPick(word="GRAPE", hint="Grows in bunches on a vine"))


def play(state, *guesses):
    for guess in guesses:
        state = game_engine.apply_guess(state, guess)
    return state


class TestNewGame:
    """Tests for new_game."""

    def test_starts_active_with_full_attempts(self, grape_game):
        assert grape_game.status is GameStatus.ACTIVE
        assert grape_game.attempts_remaining == 5
        assert grape_game.history == ()
        assert grape_game.message == ""
        assert grape_game.hint_visible is False
        assert grape_game.notice is None

    def test_word_is_uppercased(self):
        state = game_engine.new_game(WordPick(word="grape"))
        assert state.word == "GRAPE"

    def test_fallback_notice_is_kept(self):
        pick = WordPick(word="APPLE", hint="A fruit", notice="Failed to get a new word")
        assert game_engine.new_game(pick).notice == "Failed to get a new word"


class TestApplyGuess:
    """Tests for apply_guess."""

    def test_wrong_guess_costs_one_attempt(self, grape_game):
        state = play(grape_game, "CRANE")
        assert state.attempts_remaining == 4
        assert state.status is GameStatus.ACTIVE
        assert state.message == "4 tries remaining"
        assert state.guesses == ("CRANE",)

    def test_feedback_is_recorded(self, grape_game):
        record = play(grape_game, "CRANE").history[0]
        assert [item.status for item in record.feedback] == [
            FeedbackStatus.INCORRECT,
            FeedbackStatus.CORRECT,
            FeedbackStatus.CORRECT,
            FeedbackStatus.INCORRECT,
            FeedbackStatus.CORRECT,
        ]

    def test_guess_is_normalized(self, grape_game):
        state = play(grape_game, "  crane ")
        assert state.guesses == ("CRANE",)

    def test_winning_guess_keeps_attempts(self, grape_game):
        state = play(grape_game, "CRANE", "grape")
        assert state.status is GameStatus.WON
        assert state.won and state.game_over
        assert state.attempts_remaining == 4
        assert state.message == "Congratulations! You've won!"

    def test_win_on_last_attempt(self, grape_game):
        state = play(grape_game, "CRANE", "TRAIN", "BRAIN", "DRAPE")
        assert state.attempts_remaining == 1

        state = game_engine.apply_guess(state, "GRAPE")
        assert state.status is GameStatus.WON
        assert state.attempts_remaining == 1
        assert len(state.history) == 5

    def test_five_misses_lose_and_reveal_word(self, grape_game):
        state = play(grape_game, "CRANE", "TRAIN", "BRAIN", "DRAPE", "SHAPE")
        assert state.status is GameStatus.LOST
        assert state.game_over and not state.won
        assert state.attempts_remaining == 0
        assert "GRAPE" in state.message
        assert state.message == "Game Over! The word was GRAPE"

    def test_input_state_is_not_mutated(self, grape_game):
        game_engine.apply_guess(grape_game, "CRANE")
        assert grape_game.attempts_remaining == 5
        assert grape_game.history == ()

    def test_short_guess_is_rejected(self, grape_game):
        with pytest.raises(InvalidGuessLength) as exc_info:
            game_engine.apply_guess(grape_game, "GRAP")
        assert exc_info.value.message == "Guess must be 5 letters long!"

    def test_long_guess_is_rejected(self, grape_game):
        with pytest.raises(InvalidGuessLength):
            game_engine.apply_guess(grape_game, "GRAPES")

    def test_duplicate_guess_is_rejected_case_insensitively(self, grape_game):
        state = play(grape_game, "CRANE")
        with pytest.raises(DuplicateGuess) as exc_info:
            game_engine.apply_guess(state, "crane")
        assert exc_info.value.message == "You've already tried this word!"

    def test_repeated_guess_leaves_attempts_and_history(self):
        state = play(game_engine.new_game(WordPick(word="APPLE")), "CRANE")
        with pytest.raises(DuplicateGuess):
            game_engine.apply_guess(state, "CRANE")
        assert state.attempts_remaining == 4
        assert len(state.history) == 1

    def test_secret_guessed_twice_is_refused_once_won(self):
        state = play(game_engine.new_game(WordPick(word="APPLE")), "CRANE", "APPLE")
        with pytest.raises(GameAlreadyOver):
            game_engine.apply_guess(state, "APPLE")
        assert state.attempts_remaining == 4
        assert len(state.history) == 2

    @pytest.mark.parametrize("guesses", [
        ("GRAPE",),
        ("CRANE", "TRAIN", "BRAIN", "DRAPE", "SHAPE"),
    ])
    def test_no_guess_after_game_over(self, grape_game, guesses):
        state = play(grape_game, *guesses)
        with pytest.raises(GameAlreadyOver):
            game_engine.apply_guess(state, "PLANT")

    def test_reject_guess_only_sets_message(self, grape_game):
        state = play(grape_game, "CRANE")
        rejected = game_engine.reject_guess(state, "You've already tried this word!")
        assert rejected.message == "You've already tried this word!"
        assert rejected.attempts_remaining == state.attempts_remaining
        assert rejected.history == state.history


class TestResetAndHint:
    """Tests for reset_game and toggle_hint."""

    @pytest.mark.parametrize("guesses", [
        ("GRAPE",),
        ("CRANE", "TRAIN", "BRAIN", "DRAPE", "SHAPE"),
        ("CRANE",),
    ])
    def test_reset_from_any_state(self, grape_game, guesses):
        state = game_engine.toggle_hint(play(grape_game, *guesses))
        state = game_engine.reset_game(state, WordPick(word="LEVEL", hint="Reads the same both ways"))

        assert state.word == "LEVEL"
        assert state.hint == "Reads the same both ways"
        assert state.status is GameStatus.ACTIVE
        assert state.history == ()
        assert state.attempts_remaining == 5
        assert state.message == ""
        assert state.hint_visible is False

    def test_toggle_hint_flips_visibility_only(self, grape_game):
        shown = game_engine.toggle_hint(grape_game)
        assert shown.hint_visible is True
        assert shown.attempts_remaining == grape_game.attempts_remaining
        assert game_engine.toggle_hint(shown).hint_visible is False

    def test_toggle_hint_after_game_over(self, grape_game):
        state = game_engine.toggle_hint(play(grape_game, "GRAPE"))
        assert state.hint_visible is True
        assert state.status is GameStatus.WON
