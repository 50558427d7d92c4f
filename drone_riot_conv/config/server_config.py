"""
Server configuration for drone-riot-conv.

This module contains the settings used when starting the conversion server.
The expansion logic itself reads no configuration.
"""

import os
from typing import Any, Dict, Optional
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3030
DEFAULT_LOG_LEVEL = "info"


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_server_config() -> Dict[str, Any]:
    """
    Read the server settings from the environment.
    
    Returns:
        Dictionary with ``host``, ``port``, ``log_level`` and ``log_file``
        
    Raises:
        ValueError: If DRONE_RIOT_CONV_PORT is set but not an integer
    """
    log_file: Optional[str] = os.getenv("DRONE_RIOT_CONV_LOG_FILE") or None
    return {
        "host": os.getenv("DRONE_RIOT_CONV_HOST", DEFAULT_HOST),
        "port": _env_int("DRONE_RIOT_CONV_PORT", DEFAULT_PORT),
        "log_level": os.getenv("DRONE_RIOT_CONV_LOG_LEVEL", DEFAULT_LOG_LEVEL).lower(),
        "log_file": log_file,
    }


# Settings captured at import time
SERVER_CONFIG: Dict[str, Any] = load_server_config()


def get_server_config() -> Dict[str, Any]:
    """Get the current server configuration."""
    return SERVER_CONFIG
