"""
Word Source Service

Supplies the secret word and hint for each game. Three interchangeable
strategies share one interface, ``fetch_word()``:

- StaticWordSource: random pick from the curated word list
- GeneratedWordSource: asks an OpenAI chat model for a word and hint
- EndpointWordSource: calls the ``/api/word`` endpoint over HTTP

``fetch_word()`` never raises. Any failure is logged and replaced by the
fallback word, with a one-line notice for the player.
"""

import json
import random
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import requests
from openai import OpenAI, OpenAIError

from ..config.app_config import Config
from ..config.game_settings import (
    FALLBACK_HINT, FALLBACK_NOTICE, FALLBACK_WORD, WORD_LENGTH, WORD_LIST
)
from ..errors import InvalidGeneratedWord, WordSourceFailure
from ..models.word import WordPick
from ..utils.game_logger import game_logger

SYSTEM_PROMPT = (
    "You are a word game assistant. Generate a 5-letter word and a short, clever hint for it. "
    "The hint should not directly give away the word but should be helpful. "
    "Respond in JSON format with 'word' and 'hint' keys. The word should be in capital letters."
)
USER_PROMPT = "Generate a word and hint"


def fallback_pick() -> WordPick:
    return WordPick(word=FALLBACK_WORD, hint=FALLBACK_HINT, notice=FALLBACK_NOTICE)


def parse_word_payload(data: Any, word_length: int = WORD_LENGTH) -> WordPick:
    """
    Validates a ``{"word": ..., "hint": ...}`` payload.

    Args:
        data: Decoded JSON body
        word_length: Required length of the word

    Returns:
        WordPick with the word in uppercase

    Raises:
        WordSourceFailure: If the payload has the wrong shape or the word is invalid
    """
    if not isinstance(data, dict):
        raise WordSourceFailure("Word payload must be a JSON object")

    if data.get('error'):
        raise WordSourceFailure(f"Word source reported an error: {data['error']}")

    word = data.get('word')
    if not isinstance(word, str) or not word:
        raise WordSourceFailure("Word payload has no word")

    word = word.strip().upper()
    if len(word) != word_length:
        raise InvalidGeneratedWord(f"Invalid word generated: '{word}' is not {word_length} letters long")
    if not word.isalpha():
        raise InvalidGeneratedWord(f"Invalid word generated: '{word}' contains non-alphabetic characters")

    hint = data.get('hint')
    if hint is not None and not isinstance(hint, str):
        raise WordSourceFailure("Word payload hint must be a string")

    return WordPick(word=word, hint=hint or None)


class WordSource(ABC):
    """Base class for all word sources."""

    name = "base"

    def fetch_word(self) -> WordPick:
        """Returns a word/hint pair, falling back to the default word on any failure."""
        try:
            return self.generate()
        except WordSourceFailure as e:
            game_logger.log_word_fallback(self.name, e.message)
            return fallback_pick()

    @abstractmethod
    def generate(self) -> WordPick:
        """
        Produces a word/hint pair.

        Raises:
            WordSourceFailure: On any transport, parse or validation error
        """


class StaticWordSource(WordSource):
    """Uniform random pick from a fixed word list. Duplicate entries are kept."""

    name = "static"

    def __init__(self, word_list: Optional[List[str]] = None, rng: Optional[random.Random] = None):
        self.word_list = list(word_list) if word_list is not None else WORD_LIST.copy()
        self.rng = rng or random.Random()

    def generate(self) -> WordPick:
        if not self.word_list:
            raise WordSourceFailure("Word list is empty")
        return WordPick(word=self.rng.choice(self.word_list).upper())


class GeneratedWordSource(WordSource):
    """Asks an OpenAI chat model for a JSON word/hint pair."""

    name = "generated"

    def __init__(self,
                 client: Optional[OpenAI] = None,
                 model: str = Config.OPENAI_MODEL,
                 temperature: float = Config.OPENAI_TEMPERATURE,
                 word_length: int = WORD_LENGTH):
        self._client = client
        self.model = model
        self.temperature = temperature
        self.word_length = word_length

    @property
    def client(self) -> OpenAI:
        # Created on first use so a missing API key only affects this source
        if self._client is None:
            self._client = OpenAI()
        return self._client

    def generate(self) -> WordPick:
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": USER_PROMPT}
                ],
                temperature=self.temperature,
                response_format={"type": "json_object"}
            )
        except OpenAIError as e:
            raise WordSourceFailure(f"Word generation request failed: {e}") from e

        if not completion.choices:
            raise WordSourceFailure("No response from OpenAI")

        content = completion.choices[0].message.content
        if not content:
            raise WordSourceFailure("No response from OpenAI")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise WordSourceFailure(f"Generated word is not valid JSON: {e}") from e

        return parse_word_payload(data, self.word_length)


class EndpointWordSource(WordSource):
    """Fetches a word/hint pair from the ``/api/word`` endpoint."""

    name = "endpoint"

    def __init__(self,
                 base_url: str = Config.WORD_API_URL,
                 timeout: float = Config.WORD_API_TIMEOUT,
                 word_length: int = WORD_LENGTH,
                 session: Optional[requests.Session] = None):
        self.url = f"{base_url.rstrip('/')}/api/word"
        self.timeout = timeout
        self.word_length = word_length
        self.session = session or requests.Session()

    def generate(self) -> WordPick:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise WordSourceFailure(f"Word endpoint unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise WordSourceFailure(f"Word endpoint returned malformed JSON (HTTP {response.status_code})") from e

        if not response.ok:
            error = data.get('error') if isinstance(data, dict) else None
            raise WordSourceFailure(f"Word endpoint returned HTTP {response.status_code}: {error or 'no details'}")

        return parse_word_payload(data, self.word_length)


WORD_SOURCES = {
    StaticWordSource.name: StaticWordSource,
    GeneratedWordSource.name: GeneratedWordSource,
    EndpointWordSource.name: EndpointWordSource,
}


def build_word_source(config_class=Config) -> WordSource:
    """
    Selects the word source named by ``WORD_SOURCE`` in the configuration.

    Raises:
        ValueError: If the configured source name is unknown
    """
    source_name = getattr(config_class, 'WORD_SOURCE', 'static')

    if source_name == StaticWordSource.name:
        return StaticWordSource()
    if source_name == GeneratedWordSource.name:
        return GeneratedWordSource(
            model=config_class.OPENAI_MODEL,
            temperature=config_class.OPENAI_TEMPERATURE
        )
    if source_name == EndpointWordSource.name:
        return EndpointWordSource(
            base_url=config_class.WORD_API_URL,
            timeout=config_class.WORD_API_TIMEOUT
        )

    raise ValueError(f"Unknown word source '{source_name}'. Must be one of: {', '.join(WORD_SOURCES)}")
