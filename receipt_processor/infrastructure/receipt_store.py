"""
In-memory receipt storage
"""
import threading
from typing import Dict, Optional

from receipt_processor.models.domain import StoredReceipt
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)


class ReceiptStore:
    """
    Thread-safe mapping of receipt identifier to stored receipt

    Entries are immutable, so a reader either sees a complete entry or none.
    Contents are lost on restart.
    """

    def __init__(self):
        self._receipts: Dict[str, StoredReceipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, stored: StoredReceipt) -> None:
        """Store a receipt under its identifier"""
        with self._lock:
            self._receipts[receipt_id] = stored
            size = len(self._receipts)

        logger.debug("Receipt stored", receipt_id=receipt_id, store_size=size)

    def get(self, receipt_id: str) -> Optional[StoredReceipt]:
        """Get a stored receipt, None if the identifier is unknown"""
        with self._lock:
            return self._receipts.get(receipt_id)

    def clear(self) -> None:
        with self._lock:
            self._receipts.clear()

    def __contains__(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
