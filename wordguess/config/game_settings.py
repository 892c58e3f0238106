"""
Game Configuration Constants Module

This module defines all game configuration constants. All game parameters
are centralized here to enable easy modification.
"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 5
"""
Number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

# Used whenever the word source cannot supply a valid word
FALLBACK_WORD: Final[str] = "APPLE"
FALLBACK_HINT: Final[str] = "A fruit that keeps the doctor away"
FALLBACK_NOTICE: Final[str] = f"Failed to get a new word. Using default word '{FALLBACK_WORD}'"


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Duplicate entries are kept as-is; the list is sampled as an opaque data set.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the file is malformed, empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    # Convert all words to uppercase and validate
    uppercase_words = [str(word).upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")

    return uppercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: List[str] = WORD_LIST) -> bool:
    """
    Validates the format of every entry in the word database.

    Checks length, alphabetic characters and uppercase formatting. Uniqueness
    is not required.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    return True
