"""
Word Controller

Serves freshly generated words to clients that pick their own secret word.
"""

from flask import Blueprint, request, jsonify, current_app
from ..errors import InvalidGeneratedWord, WordSourceFailure
from ..utils.game_logger import game_logger

word_bp = Blueprint('word', __name__)


@word_bp.route('/word', methods=['GET'])
def get_word():
    """Generate a word and hint. Failures are reported, not replaced by a fallback."""
    try:
        game_logger.log_user_action(request, 'get_word')

        pick = current_app.word_generator.generate()

        response_data = {
            'word': pick.word,
            'hint': pick.hint
        }

        game_logger.log_server_response(request, 'get_word', True, response_data)
        return jsonify(response_data)

    except WordSourceFailure as e:
        game_logger.log_error(request, e, 'get_word')

        if isinstance(e, InvalidGeneratedWord):
            error_response = {'error': "Invalid word generated"}
        else:
            error_response = {'error': "Failed to generate word"}

        game_logger.log_server_response(request, 'get_word', False, error_response)
        return jsonify(error_response), 500

    except Exception as e:
        game_logger.log_error(request, e, 'get_word')
        error_response = {'error': "Failed to generate word"}
        game_logger.log_server_response(request, 'get_word', False, error_response)
        return jsonify(error_response), 500
