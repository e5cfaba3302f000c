"""Response helpers shared by the todo handlers."""

from typing import Any

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

SERVER_ERROR_MESSAGE = "Server encountered an error."


def respond_json(status_code: int, payload: Any) -> Response:
    """Serialize ``payload`` as the JSON body of a response."""
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))


def server_error() -> Response:
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def bad_request(message: str) -> Response:
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)
