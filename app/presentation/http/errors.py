from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "path", "query", "header", "cookie"}


def _field_name(loc: Sequence[Any]) -> str:
    """
    ("body", "title") -> "title", ("path", "task_id") -> "task_id",
    ("body", 0) (битый JSON) -> "body".
    """
    for part in reversed(loc):
        if isinstance(part, str) and part not in _LOCATION_ROOTS:
            return part
    return "body"


def request_errors_to_fields(errors: Sequence[Dict[str, Any]]) -> Dict[str, str]:
    """
    Сворачивает ошибки FastAPI/pydantic в плоский словарь "поле -> сообщение".
    Для каждого поля остаётся первое сообщение.
    """
    fields: Dict[str, str] = {}
    for err in errors:
        fields.setdefault(_field_name(err.get("loc", ())), str(err.get("msg", "Invalid value")))
    return fields


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        exc.field_errors,
    )
    return JSONResponse(status_code=400, content=exc.field_errors)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning("Task not found on %s %s: %s", request.method, request.url.path, exc.task_id)
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    fields = request_errors_to_fields(exc.errors())
    logger.warning("Malformed request on %s %s: %s", request.method, request.url.path, fields)
    return JSONResponse(status_code=400, content=fields)


def register_error_handlers(app: FastAPI) -> None:
    """
    Переводит доменные ошибки в HTTP-ответы:
    ValidationError -> 400 {поле: сообщение},
    NotFoundError -> 404 {"error": ...},
    ошибки разбора запроса -> 400 {поле: сообщение}.
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
