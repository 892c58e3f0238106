"""
Unit tests for the letter feedback algorithm.
"""

from collections import Counter

import pytest

from wordguess.config import WORD_LIST
from wordguess.errors import InvalidGuessLength
from wordguess.models.game import FeedbackStatus
from wordguess.services.game_engine import get_letter_feedback

C = FeedbackStatus.CORRECT
W = FeedbackStatus.WRONG_POSITION
X = FeedbackStatus.INCORRECT


def statuses(secret, guess):
    return [item.status for item in get_letter_feedback(secret, guess)]


class TestLetterFeedback:
    """Tests for get_letter_feedback."""

    def test_exact_match_is_all_correct(self):
        assert statuses("CRANE", "CRANE") == [C] * 5

    def test_no_common_letters(self):
        assert statuses("CRANE", "BLOTS") == [X] * 5

    def test_all_letters_misplaced(self):
        assert statuses("CRANE", "NACRE") == [W, W, W, W, C]

    def test_letters_are_kept_in_order(self):
        feedback = get_letter_feedback("CRANE", "TRAIN")
        assert [item.letter for item in feedback] == list("TRAIN")
        assert [item.status for item in feedback] == [X, C, C, X, W]

    def test_repeated_letter_in_guess_consumes_budget(self):
        """Exact matches consume a letter before misplaced matches can."""
        assert statuses("LEVEL", "LLAMA") == [C, W, X, X, X]

    def test_exact_match_is_not_over_credited_elsewhere(self):
        # Only one E in the secret and it is matched exactly at index 4
        assert statuses("CRANE", "EERIE") == [X, X, W, X, C]

    def test_repeated_letter_in_secret(self):
        assert statuses("SPEED", "EERIE") == [W, W, X, X, X]

    def test_exact_match_after_misplaced_candidate(self):
        """A later exact match wins over an earlier misplaced occurrence."""
        assert statuses("CRANE", "NANNY") == [X, W, X, C, X]

    def test_length_mismatch_raises(self):
        with pytest.raises(InvalidGuessLength):
            get_letter_feedback("APPLE", "APPLES")

    def test_any_equal_length_is_accepted(self):
        assert statuses("CAT", "ACT") == [W, W, C]


class TestFeedbackProperties:
    """Properties that must hold for every secret/guess pair."""

    @pytest.mark.parametrize("secret", WORD_LIST[:40])
    def test_word_against_itself_is_all_correct(self, secret):
        assert statuses(secret, secret) == [C] * len(secret)

    @pytest.mark.parametrize("secret,guess", [
        ("LEVEL", "LLAMA"),
        ("APPLE", "PAPAL"),
        ("KNOCK", "CROCK"),
        ("GEESE", "EERIE"),
        ("OPERA", "POPPA"),
        ("ZEBRA", "ABBEY"),
    ])
    def test_credited_letters_never_exceed_secret_count(self, secret, guess):
        secret_counts = Counter(secret)
        credited = Counter(
            item.letter for item in get_letter_feedback(secret, guess)
            if item.status in (C, W)
        )
        for letter, count in credited.items():
            assert count <= secret_counts[letter]
