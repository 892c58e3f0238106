"""
Word Guessing Game Server - Main Entry Point

Initializes the word source and game service, then starts the Flask application.
"""

from wordguess import create_app
from wordguess.config import Config, validate_word_list_integrity
from wordguess.services.game_service import initialize_game_service
from wordguess.services.word_source import build_word_source
from wordguess.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()

        word_source = build_word_source(Config)
        print(f"✓ Word source '{word_source.name}' ready")

        initialize_game_service(word_source)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(f"Word Guessing Server starting with word source '{word_source.name}'")

        print(f"\nStarting Word Guessing Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Guessing Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
