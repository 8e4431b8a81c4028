"""
Error types and their HTTP translation.

The only error intrinsic to the service layer is ``NotFoundError``:
raised when an operation references a record id (including a foreign
``dogId``) that is absent from its collection.  Malformed input is
rejected by FastAPI's request validation before it reaches a service.

``register_exception_handlers`` maps both onto the ``{error, message}``
body documented by ``ErrorResponse``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"


class ErrorResponse(BaseModel):
    """Body returned for every 4xx response."""

    error: str = Field(..., examples=[NOT_FOUND, VALIDATION_ERROR])
    message: str = Field(..., examples=["Dog with ID 6c1f... not found"])
    details: Optional[Any] = None


class NotFoundError(Exception):
    """A referenced record does not exist in its collection.

    ``kind`` is the human readable resource name (``"Dog"``,
    ``"Health record"``...) and ``record_id`` the id that was looked up.
    """

    code = NOT_FOUND

    def __init__(self, kind: str, record_id: Any) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with ID {record_id} not found")

    @property
    def message(self) -> str:
        return str(self)


# Response documentation shared by routers.
NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Not found"}}
VALIDATION_RESPONSE = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid input data"}}


def _validation_summary(errors: List[dict]) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', 'invalid value')}"


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("%s %s -> 404 (%s)", request.method, request.url.path, exc.message)
    body = ErrorResponse(error=exc.code, message=exc.message)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.model_dump(exclude_none=True))


async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    logger.info("%s %s -> 400 (%d validation errors)", request.method, request.url.path, len(errors))
    body = ErrorResponse(
        error=VALIDATION_ERROR,
        message=_validation_summary(errors),
        details=jsonable_encoder(errors, exclude={"ctx", "url"}),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``NotFoundError`` and request validation handlers."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
