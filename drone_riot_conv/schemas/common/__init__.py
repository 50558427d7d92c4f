"""
Common schemas for drone-riot-conv.

Base classes shared by the pipeline record and the HTTP envelopes.
"""

from .base import BaseSchema

__all__ = ["BaseSchema"]
