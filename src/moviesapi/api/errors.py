"""API error types and the handlers that turn them into responses."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """The requested entity does not exist. Rendered as a bare 404."""

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} {entity_id!r} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailedError(Exception):
    """Request content failed validation beyond what the schemas check."""

    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = list(messages)


def format_validation_errors(errors: Iterable[dict[str, Any]]) -> list[str]:
    """
    Flatten pydantic/FastAPI error dicts into "field: message" strings.

    The location prefix ("body", "query", "path", ...) is dropped, so
    ("body", "name") becomes "name" and ("query", "page") becomes "page".
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    logger.debug(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def validation_failed_handler(request: Request, exc: ValidationFailedError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.messages)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_validation_errors(exc.errors()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationFailedError, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
