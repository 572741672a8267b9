"""
Health check handlers
"""
from fastapi import APIRouter, Depends

from receipt_processor.models.responses import HealthResponse
from receipt_processor.services.receipt_service import ReceiptService
from receipt_processor.api.dependencies import get_receipt_service
from receipt_processor.config import get_settings

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse, include_in_schema=False)
def health_check(
    receipt_service: ReceiptService = Depends(get_receipt_service)
) -> HealthResponse:
    """Basic health check"""
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        receipts_stored=receipt_service.stored_count()
    )
