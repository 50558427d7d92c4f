"""
Pydantic models for the drone-riot-conv API.
"""

from pydantic import Field

from ..schemas.common.base import BaseSchema


class ConvertConfig(BaseSchema):
    """
    Configuration file as sent and returned by Drone.
    
    Attributes:
        data: Raw YAML text, possibly holding several documents
    """
    data: str = Field(..., description="Raw pipeline configuration text")


class ConvertRequest(BaseSchema):
    """
    Conversion request sent by Drone.
    
    Drone also sends repository and build details, which are ignored.
    
    Attributes:
        config: The configuration file to convert
    """
    config: ConvertConfig = Field(..., description="Configuration file to convert")


class ConvertResponse(ConvertConfig):
    """
    Response to a conversion request.
    
    Same shape as the request's ``config`` object.
    """


class ErrorResponse(BaseSchema):
    """
    Body of every error response.
    
    Attributes:
        message: Human readable error description
    """
    message: str
