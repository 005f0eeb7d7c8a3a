import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class TaskValidationError(ValueError):
    """Raised when a task fails validation in the service layer."""


async def task_validation_error_handler(request: Request, exc: TaskValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Storage error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage unavailable"},
    )


def add_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskValidationError, task_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
