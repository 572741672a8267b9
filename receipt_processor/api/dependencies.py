"""
FastAPI dependencies for dependency injection
"""
from functools import lru_cache

from receipt_processor.infrastructure.receipt_store import ReceiptStore
from receipt_processor.services.receipt_validator import ReceiptValidator
from receipt_processor.services.points_engine import PointsEngine
from receipt_processor.services.receipt_service import ReceiptService
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache()
def get_receipt_store() -> ReceiptStore:
    """
    Get the ReceiptStore instance (singleton)
    Shared by all requests for the lifetime of the process
    """
    logger.info("Creating receipt store")
    return ReceiptStore()


@lru_cache()
def get_receipt_validator() -> ReceiptValidator:
    """Get the ReceiptValidator instance (singleton)"""
    return ReceiptValidator()


@lru_cache()
def get_points_engine() -> PointsEngine:
    """Get the PointsEngine instance (singleton)"""
    return PointsEngine()


@lru_cache()
def get_receipt_service() -> ReceiptService:
    """Get the ReceiptService instance (singleton)"""
    return ReceiptService(
        validator=get_receipt_validator(),
        points_engine=get_points_engine(),
        store=get_receipt_store()
    )
