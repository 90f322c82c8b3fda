# photoshare/api/errors.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from photoshare.core.exceptions import (
    AlreadyExists,
    ConstraintViolation,
    NotFound,
    SchemaCreationError,
    SelfReferenceRejected,
    StoreError,
    StoreUnavailable,
)
from photoshare.core.logger import logger

# 에러 종류 -> HTTP 상태 코드 (위에서부터 먼저 매칭)
STATUS_BY_ERROR = [
    (NotFound, status.HTTP_404_NOT_FOUND),
    (AlreadyExists, status.HTTP_409_CONFLICT),
    (SelfReferenceRejected, status.HTTP_400_BAD_REQUEST),
    (ConstraintViolation, status.HTTP_400_BAD_REQUEST),
    (StoreUnavailable, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (SchemaCreationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

def status_for(exc: StoreError) -> int:
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR

async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """저장소 에러를 JSON 응답으로 변환"""
    code = status_for(exc)
    if code >= 500:
        logger.error(f"{request.method} {request.url.path} - {type(exc).__name__}: {exc}")
    else:
        logger.info(f"{request.method} {request.url.path} - {type(exc).__name__}: {exc}")

    return JSONResponse(status_code=code, content={"detail": str(exc)})

def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
