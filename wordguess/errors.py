"""
Game Exceptions

Every error here is recovered somewhere; none is fatal to the server.
"""


class WordGameError(Exception):
    """Base class for game errors. ``message`` is safe to show to the player."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GuessRejected(WordGameError):
    """Raised when a guess is refused before evaluation. No attempt is consumed."""
    pass


class InvalidGuessLength(GuessRejected):
    """Raised when the guess length differs from the secret word length."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Guess must be {expected} letters long!")
        self.expected = expected
        self.actual = actual


class DuplicateGuess(GuessRejected):
    """Raised when the guess was already submitted in this game."""

    def __init__(self, guess: str):
        super().__init__("You've already tried this word!")
        self.guess = guess


class GameAlreadyOver(WordGameError):
    """Raised when a guess is submitted after the game was won or lost."""

    def __init__(self):
        super().__init__("Game is already over")


class GameNotFound(WordGameError):
    """Raised when no game exists for the given id."""

    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id


class WordSourceFailure(WordGameError):
    """Raised when a word source cannot produce a valid word/hint pair."""
    pass


class InvalidGeneratedWord(WordSourceFailure):
    """Raised when a word source returns a word of the wrong length or letters."""
    pass
