# app/api/v1/error_handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import CustomerServiceError, ErrorKind
from app.core.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.CUSTOMER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.EMAIL_UNAVAILABLE: status.HTTP_409_CONFLICT,
}


async def customer_service_error_handler(request: Request, exc: CustomerServiceError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} -> {status_code} ({exc.kind.value})")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error_code": exc.kind.value},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomerServiceError, customer_service_error_handler)
