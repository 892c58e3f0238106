"""
Word Guessing Game Server Application Package

A five-letter word guessing game with per-letter feedback. The secret word
comes from a static list, an OpenAI model, or a remote word endpoint.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.word_controller import word_bp

    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(word_bp, url_prefix='/api')

    # Generator behind GET /api/word, independent of the game service's word source
    from .services.word_source import GeneratedWordSource
    app.word_generator = GeneratedWordSource(
        model=config_class.OPENAI_MODEL,
        temperature=config_class.OPENAI_TEMPERATURE
    )

    return app
