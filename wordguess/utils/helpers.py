"""
Helper Functions

Contains utility functions used throughout the application, including the
translation of game state into the JSON shape the client renders.
"""

from typing import Any, Dict, Optional

from flask import request

from ..models.game import FeedbackStatus, GameState, GuessRecord

# Tile colour for each feedback status
FEEDBACK_DISPLAY: Dict[FeedbackStatus, str] = {
    FeedbackStatus.CORRECT: "green",
    FeedbackStatus.WRONG_POSITION: "yellow",
    FeedbackStatus.INCORRECT: "gray",
}


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': request_obj.remote_addr or 'unknown'
    }


def feedback_display(status: FeedbackStatus) -> str:
    return FEEDBACK_DISPLAY[status]


def serialize_record(record: GuessRecord) -> Dict[str, Any]:
    return {
        'guess': record.guess,
        'feedback': [
            {
                'letter': item.letter,
                'status': item.status.value,
                'display': feedback_display(item.status)
            }
            for item in record.feedback
        ]
    }


def serialize_state(state: GameState, game_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Public view of a game state.

    The secret word is only included once the game is over, and the hint
    only while the player has it revealed.
    """
    return {
        'game_id': game_id,
        'status': state.status.value,
        'game_over': state.game_over,
        'won': state.won,
        'attempts_remaining': state.attempts_remaining,
        'max_attempts': state.max_attempts,
        'word_length': len(state.word),
        'history': [serialize_record(record) for record in state.history],
        'message': state.message,
        'notice': state.notice,
        'hint_visible': state.hint_visible,
        'hint': state.hint if state.hint_visible else None,
        'has_hint': state.hint is not None,
        'answer': state.word if state.game_over else None
    }
