"""Relay error taxonomy.

Every failure the relay reports to its caller is a ``RelayError`` and is rendered
as ``{"error": <message>}`` with the error's status code.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

MISSING_ACCESS_TOKEN = "Missing Google access token."
NO_FILE_UPLOADED = "No file uploaded."
NO_FILES_UPLOADED = "No files uploaded."
ALBUM_TITLE_REQUIRED = "Album title required."


class RelayError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientInputError(RelayError):
    """Required caller input is missing or blank."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(RelayError):
    """Google answered with a non-success status; its body is passed back as-is."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body, status_code=status_code)
        self.body = body


class TransportError(RelayError):
    """The outbound call could not be completed or its payload could not be decoded."""


async def relay_error_handler(_: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request."


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": describe_validation_errors(exc)},
    )


def setup_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
