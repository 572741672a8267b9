"""
Main receipt service - orchestrator
"""
import uuid

from receipt_processor.infrastructure.receipt_store import ReceiptStore
from receipt_processor.services.receipt_validator import ReceiptValidator
from receipt_processor.services.points_engine import PointsEngine
from receipt_processor.models.domain import StoredReceipt
from receipt_processor.models.requests import ReceiptRequest
from receipt_processor.core.exceptions import ReceiptNotFoundError, ReceiptValidationError
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)


class ReceiptService:
    """
    Receipt processing service
    Orchestrates the whole flow: validation → scoring → storage
    """

    def __init__(
        self,
        validator: ReceiptValidator,
        points_engine: PointsEngine,
        store: ReceiptStore
    ):
        """
        Initialize the receipt service

        Args:
            validator: Raw receipt validator
            points_engine: Scoring engine
            store: Receipt storage
        """
        self.validator = validator
        self.points_engine = points_engine
        self.store = store

        logger.info("Receipt service initialized")

    def process_receipt(self, raw: ReceiptRequest) -> str:
        """
        Validate, score and store a receipt

        Args:
            raw: Receipt as received from the client

        Returns:
            Identifier of the stored receipt

        Raises:
            ReceiptValidationError: The receipt is invalid, nothing is stored
        """
        try:
            receipt = self.validator.validate(raw)
        except ReceiptValidationError as e:
            logger.warning(
                "Receipt rejected",
                kind=e.kind.value,
                field=e.field,
                error=e.message
            )
            raise

        points = self.points_engine.score(receipt)
        receipt_id = str(uuid.uuid4())
        self.store.put(receipt_id, StoredReceipt(receipt=receipt, points=points))

        logger.info(
            "Receipt processed",
            receipt_id=receipt_id,
            points=points,
            items_count=len(receipt.items)
        )
        return receipt_id

    def get_points(self, receipt_id: str) -> int:
        """
        Points of a previously processed receipt

        Args:
            receipt_id: Identifier returned by process_receipt

        Returns:
            Awarded points

        Raises:
            ReceiptNotFoundError: The identifier was never issued
        """
        stored = self.store.get(receipt_id)
        if stored is None:
            logger.info("Receipt not found", receipt_id=receipt_id)
            raise ReceiptNotFoundError(receipt_id)
        return stored.points

    def stored_count(self) -> int:
        return len(self.store)
