"""Error types and the FastAPI handlers that turn them into responses."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import pydantic
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class CloudApiError(Exception):
    """Base class for errors that are reported back to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BackendError(CloudApiError):
    """The backend refused the request or answered with an unexpected status."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        backend_status: Optional[int] = None,
    ):
        if error_code:
            message = f"{message}: {error_code}"
        super().__init__(message)
        self.error_code = error_code
        self.backend_status = backend_status


class ItemValidationError(CloudApiError):
    """An item is missing a required attribute."""


def response_status(response: dict) -> Optional[int]:
    """HTTP status code botocore recorded for a response."""
    return response.get("ResponseMetadata", {}).get("HTTPStatusCode")


def ensure_status(response: dict, expected: int, message: str) -> dict:
    """Raise `BackendError` unless the backend answered with `expected`."""
    actual = response_status(response)
    if actual != expected:
        raise BackendError(message, backend_status=actual)
    return response


@contextmanager
def translate_client_errors(message: str) -> Iterator[None]:
    """Re-raise botocore errors, client-side parameter checks included, as `BackendError`s."""
    try:
        yield
    except ClientError as err:
        error = err.response.get("Error", {})
        raise BackendError(
            message,
            error_code=error.get("Code"),
            backend_status=response_status(err.response),
        ) from err
    except BotoCoreError as err:
        raise BackendError(message, error_code=type(err).__name__) from err


async def handle_cloud_api_errors(request: Request, exc: CloudApiError) -> PlainTextResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def handle_pydantic_validation_errors(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
    errors = exc.errors()
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": [
                {
                    "msg": error["msg"],
                    "input": error["input"],
                }
                for error in errors
            ]
        },
    )


async def handle_broad_exceptions(request: Request, call_next):
    """Handle any exception that goes unhandled by a more specific exception handler."""
    try:
        return await call_next(request)
    except Exception as err:  # pylint: disable=broad-except
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {err}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
