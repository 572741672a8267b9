"""
Receipt handlers - processing receipts and looking up their points
"""
from fastapi import APIRouter, Depends, status

from receipt_processor.models.requests import ReceiptRequest
from receipt_processor.models.responses import (
    ErrorResponse,
    PointsResponse,
    ProcessReceiptResponse
)
from receipt_processor.services.receipt_service import ReceiptService
from receipt_processor.api.dependencies import get_receipt_service
from receipt_processor.api.error_handlers import invalid_receipt_response, not_found_response
from receipt_processor.core.exceptions import ReceiptNotFoundError, ReceiptValidationError
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/receipts", tags=["Receipts"])


@router.post(
    "/process",
    response_model=ProcessReceiptResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
)
def process_receipt(
    request: ReceiptRequest,
    receipt_service: ReceiptService = Depends(get_receipt_service)
):
    """
    Submit a receipt for processing

    Validates and scores the receipt and returns the identifier under
    which its points can be looked up.

    Raises:
        400: The receipt is invalid
    """
    try:
        receipt_id = receipt_service.process_receipt(request)
    except ReceiptValidationError as e:
        return invalid_receipt_response(e)

    return ProcessReceiptResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=PointsResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
)
def get_points(
    receipt_id: str,
    receipt_service: ReceiptService = Depends(get_receipt_service)
):
    """
    Points awarded to a processed receipt

    Raises:
        404: No receipt found for that id
    """
    try:
        points = receipt_service.get_points(receipt_id)
    except ReceiptNotFoundError:
        return not_found_response()

    return PointsResponse(points=points)
