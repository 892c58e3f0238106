"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import FeedbackStatus, GameState, GameStatus, GuessRecord, LetterFeedback
from .word import WordPick

__all__ = ['FeedbackStatus', 'GameState', 'GameStatus', 'GuessRecord', 'LetterFeedback', 'WordPick']
