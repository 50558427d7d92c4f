"""
Base schema definitions for drone-riot-conv.

This module provides the foundational Pydantic v2 model that the pipeline
record and the API envelopes build on.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base class for all schema models in drone-riot-conv.
    
    This class provides consistent configuration and utility methods
    for all Pydantic models in the system.
    """
    
    model_config = ConfigDict(
        extra="ignore",               # Drone sends more than we read
        populate_by_name=True,        # Allow population by field name as well as alias
    )
    
    def model_dump_safe(self, exclude_none: bool = True, **kwargs: Any) -> Dict[str, Any]:
        """Dump the model to a dict keyed by alias.
        
        Args:
            exclude_none: Whether to exclude None values
            **kwargs: Additional arguments to pass to model_dump
            
        Returns:
            Dict representation of the model using field aliases
        """
        kwargs.setdefault("by_alias", True)
        return self.model_dump(exclude_none=exclude_none, **kwargs)
