"""
Error taxonomy and JSON error rendering.

Every failure the API reports to clients is rendered as
``{"error": "<message>"}`` with the status code carried by the
exception.  FastAPI's own request validation errors are translated
into the same shape so clients see a single error format.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MessageBoardError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MessageBoardError):
    """A required message field is missing or not usable."""

    default_message = "Author and content are required"


class MalformedRequestError(MessageBoardError):
    """The request body could not be parsed as JSON."""

    default_message = "Malformed JSON body"


class OriginNotAllowedError(MessageBoardError):
    """The request's ``Origin`` is rejected by the CORS policy."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed by CORS"


def error_response(exc: MessageBoardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def message_board_error_handler(request: Request, exc: MessageBoardError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map pydantic/body-parsing failures onto the API error taxonomy."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return await message_board_error_handler(request, MalformedRequestError())
    return await message_board_error_handler(request, ValidationError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MessageBoardError, message_board_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
