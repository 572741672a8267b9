"""
Exception handlers and error responses
"""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from receipt_processor.config import get_settings
from receipt_processor.core.exceptions import ReceiptValidationError
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)

INVALID_RECEIPT = "The receipt is invalid"
RECEIPT_NOT_FOUND = "No receipt found for that id"
INTERNAL_ERROR = "Internal server error"


def invalid_receipt_response(error: ReceiptValidationError = None) -> JSONResponse:
    """
    400 response for a rejected receipt

    The error kind and field are only included when EXPOSE_VALIDATION_ERRORS is on.
    """
    content = {"description": INVALID_RECEIPT}
    if error is not None and get_settings().EXPOSE_VALIDATION_ERRORS:
        content["error"] = error.kind.value
        content["field"] = error.field

    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"description": RECEIPT_NOT_FOUND}
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON or wrong field types are an invalid receipt, not a 422"""
    logger.warning(
        "Request body rejected",
        path=request.url.path,
        errors_count=len(exc.errors())
    )
    return invalid_receipt_response()


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"description": INTERNAL_ERROR}
    )
