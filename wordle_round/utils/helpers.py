"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a request (HTTP or Socket.IO)."""
    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'session_id': getattr(request_obj, 'sid', None),
    }


def normalize_guess(guess) -> Optional[str]:
    """Trim and uppercase a raw guess; None if it is not a string."""
    if not isinstance(guess, str):
        return None
    return guess.strip().upper()
