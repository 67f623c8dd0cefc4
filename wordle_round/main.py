"""
Wordle Round Server - Main Entry Point

Creates the Flask-SocketIO application and starts serving.
"""

import argparse

from . import create_app
from .config import config
from .utils.game_logger import game_logger


def main(argv=None):
    """Main function to build the app and start the server."""
    parser = argparse.ArgumentParser(description="Run the Wordle round server")
    parser.add_argument('--env', choices=sorted(config), default='default',
                        help="configuration profile")
    args = parser.parse_args(argv)

    config_class = config[args.env]

    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Round Server starting")

        print(f"\nStarting Wordle Round Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT,
                     debug=config_class.DEBUG, allow_unsafe_werkzeug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Round Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
