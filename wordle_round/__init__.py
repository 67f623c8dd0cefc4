"""
Wordle Round Server Application Package

A single-player word-guessing game: a pure guess evaluator and round state
machine, served over HTTP and Socket.IO by a thin Flask layer.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.setup(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Word source and game service
    from .services.word_source import WordSource
    from .services.game_service import initialize_game_service
    word_source = WordSource.from_files(
        app.config['WORD_LIST_FILE'],
        app.config.get('VALID_GUESSES_FILE'),
        seed=app.config.get('RANDOM_SEED')
    )
    initialize_game_service(word_source, app.config['MAX_ROUNDS'])

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
