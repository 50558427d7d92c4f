"""
FastAPI server implementation for drone-riot-conv.

This module exposes the conversion endpoint Drone calls and maps failures to
JSON error responses of the form ``{"message": "..."}``.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from .core import PipelineEncodeError, expand
from .models import ConvertRequest, ConvertResponse, ErrorResponse

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="drone-riot-conv",
    description="Drone conversion extension that fans out parallel pipelines",
    version=__version__,
)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build a JSON error response with the given status and message."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump_safe(),
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejecting request to {request.url.path}: invalid body: {exc.errors()}")
    return error_response(HTTPStatus.BAD_REQUEST, "Invalid Body")


@app.exception_handler(PipelineEncodeError)
async def encode_error_handler(request: Request, exc: PipelineEncodeError) -> JSONResponse:
    logger.error(f"Unhandled application error: {exc!r} (caused by {exc.__cause__!r})")
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        message = HTTPStatus(exc.status_code).phrase
    except ValueError:
        message = str(exc.detail)
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error: {exc!r}")
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal Server Error")


@app.post("/convert", response_model=ConvertResponse)
def convert(request: ConvertRequest) -> ConvertResponse:
    """
    Convert a Drone configuration file.
    
    Args:
        request: Conversion request carrying the raw configuration text
        
    Returns:
        The configuration with every parallel pipeline expanded
    """
    logger.info("Processing convert request")
    return ConvertResponse(data=expand(request.config.data))
