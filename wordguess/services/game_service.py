"""
Game Service

Holds the current game of each session and applies the engine's
transitions to it.
"""

import uuid
from typing import Dict, Optional

from ..errors import GameNotFound, GuessRejected
from ..models.game import GameState
from . import game_engine
from .word_source import StaticWordSource, WordSource


class GameService:
    """
    Game session manager.

    This class handles:
    - Game session management with unique game IDs
    - Fetching a word from the word source at game start and on reset
    - Routing guesses and hint toggles through the game engine

    Each session holds exactly one game. Resetting replaces it in place.
    """

    def __init__(self, word_source: Optional[WordSource] = None):
        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.word_source = word_source or StaticWordSource()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a word from the word source.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = game_engine.new_game(self.word_source.fetch_word())
        return game_id

    def get_game_state(self, game_id: str) -> GameState:
        """
        Raises:
            GameNotFound: If no game exists for game_id
        """
        if game_id not in self.games:
            raise GameNotFound(game_id)
        return self.games[game_id]

    def make_guess(self, game_id: str, guess: str) -> GameState:
        """
        Processes a guess and stores the resulting state.

        A rejected guess (wrong length, duplicate) is remembered as the
        game's current message and then re-raised for the caller.

        Raises:
            GameNotFound: If no game exists for game_id
            GameAlreadyOver: If the game was already won or lost
            GuessRejected: If the guess was refused before evaluation
        """
        state = self.get_game_state(game_id)

        try:
            new_state = game_engine.apply_guess(state, guess)
        except GuessRejected as e:
            self.games[game_id] = game_engine.reject_guess(state, e.message)
            raise

        self.games[game_id] = new_state
        return new_state

    def reset_game(self, game_id: str) -> GameState:
        """Replaces the session's game with a fresh one using a new word."""
        state = self.get_game_state(game_id)
        new_state = game_engine.reset_game(state, self.word_source.fetch_word())
        self.games[game_id] = new_state
        return new_state

    def toggle_hint(self, game_id: str) -> GameState:
        state = game_engine.toggle_hint(self.get_game_state(game_id))
        self.games[game_id] = state
        return state

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_source: Optional[WordSource] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_source)
    return _game_service
