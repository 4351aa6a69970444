"""API error handling

Use case errors are raised as ClientError and rendered as
``{"error": {"code": ..., "message": ...}}``.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.errors import ErrorCode

logger = logging.getLogger(__name__)


def status_for_error(error: Error) -> int:
    """Map a use case error code to an HTTP status code"""
    if error.code == ErrorCode.VALIDATION_ERROR:
        return status.HTTP_400_BAD_REQUEST
    if error.code in ErrorCode.BUSINESS_RULE_ERRORS:
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if error.code in ErrorCode.NOT_FOUND_ERRORS:
        return status.HTTP_404_NOT_FOUND
    if error.code in ErrorCode.CONFLICT_ERRORS:
        return status.HTTP_409_CONFLICT
    if error.code == ErrorCode.STORAGE_FAILURE:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code

    @classmethod
    def from_error(cls, error: Error) -> "ClientError":
        return cls(error, status_code=status_for_error(error))


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.error.code} {exc.error.message} ({exc.error.reason})"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.error.code,
                "message": exc.error.message,
            }
        },
    )
