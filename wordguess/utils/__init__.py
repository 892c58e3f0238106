"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_user_identity, feedback_display, serialize_state
from .game_logger import game_logger

__all__ = ['get_user_identity', 'feedback_display', 'serialize_state', 'game_logger']
