"""
Services Package

Contains all business logic and service classes.
"""

from .game_engine import get_letter_feedback, apply_guess, new_game, reset_game, toggle_hint
from .game_service import GameService, get_game_service, initialize_game_service
from .word_source import (
    WordSource, StaticWordSource, GeneratedWordSource, EndpointWordSource, build_word_source
)

__all__ = [
    'get_letter_feedback', 'apply_guess', 'new_game', 'reset_game', 'toggle_hint',
    'GameService', 'get_game_service', 'initialize_game_service',
    'WordSource', 'StaticWordSource', 'GeneratedWordSource', 'EndpointWordSource',
    'build_word_source'
]
