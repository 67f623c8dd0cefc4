"""
WebSocket Event Handlers

Lets a client drive a round over Socket.IO instead of HTTP. Each event is
answered to the sender only.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit

from ..models.errors import GameNotFoundError, GuessValidationError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def _emit_error(event, message, code=None, game_id=None):
    emit(event, {
        'success': False,
        'game_id': game_id,
        'error': message,
        'error_code': code
    })


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(auth=None):
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"Socket connected: {request.sid}")

    @socketio.on('new_game')
    def handle_new_game(data=None):
        game_service = get_game_service()
        if not game_service:
            _emit_error('game_error', 'Game service unavailable')
            return

        game_logger.log_user_action(request, 'new_game', transport='websocket')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)
        game_logger.log_game_event(game_id, 'game_created', request.remote_addr)

        emit('game_started', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        })

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        game_service = get_game_service()
        if not game_service:
            _emit_error('game_error', 'Game service unavailable')
            return

        if not isinstance(data, dict):
            _emit_error('guess_rejected', 'Guess is required')
            return

        game_id = data.get('game_id')
        guess = data.get('guess')

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        try:
            state, result = game_service.make_guess(game_id, guess)
        except (GameNotFoundError, GuessValidationError) as error:
            _emit_error('guess_rejected', error.message, error.code, game_id)
            return

        if state.game_over:
            event = 'game_won' if state.won else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                rounds_used=state.current_round, target_word=state.answer
            )

        emit('guess_result', {
            'success': True,
            'game_id': game_id,
            'result': result.to_dict(),
            'state': asdict(state)
        })

    @socketio.on('reset_game')
    def handle_reset_game(data):
        game_service = get_game_service()
        if not game_service:
            _emit_error('game_error', 'Game service unavailable')
            return

        game_id = data.get('game_id') if isinstance(data, dict) else None
        game_logger.log_user_action(request, 'reset_game', game_id, transport='websocket')

        try:
            state = game_service.reset_game(game_id)
        except GameNotFoundError as error:
            _emit_error('game_error', error.message, error.code, game_id)
            return

        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)
        emit('game_reset', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        })
