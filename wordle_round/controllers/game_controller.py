"""
Game Controller

Handles all round-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, request, jsonify

from ..config.game_settings import WORD_LENGTH
from ..models.errors import GameNotFoundError, GuessValidationError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found',
        'error_code': GameNotFoundError.code
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _server_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new round."""
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
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH, max_rounds=state.max_rounds
        )
        game_logger.log_game_event(game_id, 'game_created', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current round state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        try:
            state, result = game_service.make_guess(game_id, guess)
        except GameNotFoundError:
            return _not_found('submit_guess', game_id)
        except GuessValidationError as error:
            error_response = {
                'success': False,
                'error': error.message,
                'error_code': error.code
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error.code, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'result': result.to_dict(),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.guess, round=state.current_round, game_over=state.game_over
        )

        if state.game_over:
            if state.won:
                game_logger.log_game_event(
                    game_id, 'game_won', request.remote_addr,
                    rounds_used=state.current_round, target_word=state.answer
                )
            else:
                game_logger.log_game_event(
                    game_id, 'game_lost', request.remote_addr,
                    rounds_used=state.current_round, target_word=state.answer,
                    final_guess=result.guess
                )

        return jsonify(response_data)

    except Exception as e:
        return _server_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Start a fresh round under the same game id."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', game_id)

        try:
            state = game_service.reset_game(game_id)
        except GameNotFoundError:
            return _not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('reset_game', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        if not success:
            return _not_found('delete_game', game_id)

        response_data = {
            'success': True
        }

        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.active_game_count if game_service else 0,
            'target_words': len(game_service.word_source) if game_service else 0,
            'valid_guesses': len(game_service.word_source.valid_guesses) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
