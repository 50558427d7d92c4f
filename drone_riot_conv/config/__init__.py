"""
Configuration for drone-riot-conv.

Settings are read from the environment, optionally seeded from a ``.env``
file in the working directory.
"""

from .server_config import SERVER_CONFIG, get_server_config

__all__ = ["SERVER_CONFIG", "get_server_config"]
