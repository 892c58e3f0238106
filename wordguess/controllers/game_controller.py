"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..errors import GameAlreadyOver, GameNotFound, GuessRejected
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': serialize_state(state, game_id)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=len(state.word), max_attempts=state.max_attempts,
            fallback_word=state.notice is not None
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state, game_id)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts_remaining=state.attempts_remaining, game_over=state.game_over
        )

        return jsonify(response_data)

    except GameNotFound:
        return _game_not_found('get_state', game_id)
    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        try:
            state = game_service.make_guess(game_id, guess)
        except GuessRejected as e:
            error_response = {
                'success': False,
                'error': e.message,
                'state': serialize_state(game_service.get_game_state(game_id), game_id)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=e.message, attempted_guess=guess
            )
            return jsonify(error_response), 400
        except GameAlreadyOver as e:
            error_response = {
                'success': False,
                'error': e.message
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 409

        response_data = {
            'success': True,
            'state': serialize_state(state, game_id)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, attempts_remaining=state.attempts_remaining, game_over=state.game_over
        )

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                guesses_used=len(state.history), target_word=state.word,
                final_guess=state.history[-1].guess
            )

        return jsonify(response_data)

    except GameNotFound:
        return _game_not_found('submit_guess', game_id)
    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Start over with a new word, from any state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', game_id)

        previous = game_service.get_game_state(game_id)
        state = game_service.reset_game(game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state, game_id)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(
            game_id, 'game_reset', request.remote_addr,
            previous_status=previous.status.value, fallback_word=state.notice is not None
        )

        return jsonify(response_data)

    except GameNotFound:
        return _game_not_found('reset_game', game_id)
    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/hint', methods=['POST'])
def toggle_hint(game_id):
    """Show or hide the hint."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'toggle_hint', game_id)

        state = game_service.toggle_hint(game_id)

        response_data = {
            'success': True,
            'state': serialize_state(state, game_id)
        }

        game_logger.log_server_response(
            request, 'toggle_hint', True, response_data, game_id,
            hint_visible=state.hint_visible
        )

        return jsonify(response_data)

    except GameNotFound:
        return _game_not_found('toggle_hint', game_id)
    except Exception as e:
        game_logger.log_error(request, e, 'toggle_hint', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'toggle_hint', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'word_source': game_service.word_source.name if game_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
