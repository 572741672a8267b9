"""
Validation of raw receipts into typed domain models
"""
import re
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import List

from receipt_processor.models.domain import Receipt, Item
from receipt_processor.models.requests import ReceiptRequest, ItemRequest
from receipt_processor.core.exceptions import (
    EmptyFieldError,
    InvalidFormatError,
    InvalidNumberError,
    TooFewItemsError
)
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)


class ReceiptValidator:
    """
    Converts raw receipt fields into a validated Receipt

    Fields are checked in a fixed order and the first violation is raised,
    nothing is accumulated.
    """

    DATE_PATTERN = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})')
    TIME_PATTERN = re.compile(r'([01][0-9]|2[0-3]):([0-5][0-9])')
    # Unsigned amount with at most two fractional digits
    AMOUNT_PATTERN = re.compile(r'[0-9]+(\.[0-9]{1,2})?')

    def validate(self, raw: ReceiptRequest) -> Receipt:
        """
        Validate a raw receipt

        Args:
            raw: Receipt as received from the client

        Returns:
            Validated Receipt

        Raises:
            EmptyFieldError: Retailer, date or time is blank
            InvalidFormatError: Date or time does not parse
            InvalidNumberError: Total or an item price is malformed
            TooFewItemsError: Item list is empty
        """
        retailer = self._parse_retailer(raw.retailer)
        purchase_date = self._parse_date(raw.purchase_date)
        purchase_time = self._parse_time(raw.purchase_time)
        total = self._parse_amount(raw.total, field="total")
        items = self._parse_items(raw.items)

        return Receipt(
            retailer=retailer,
            purchase_date=purchase_date,
            purchase_time=purchase_time,
            total=total,
            items=items
        )

    def _parse_retailer(self, value: str) -> str:
        if value == "":
            raise EmptyFieldError("retailer", "Retailer is empty")
        return value

    def _parse_date(self, value: str) -> date:
        """Parse YYYY-MM-DD into a real calendar date"""
        if value == "":
            raise EmptyFieldError("purchaseDate", "Purchase date is empty")

        match = self.DATE_PATTERN.fullmatch(value)
        if not match:
            raise InvalidFormatError(
                "purchaseDate",
                f"Purchase date must be YYYY-MM-DD, got {value!r}"
            )

        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError as e:
            raise InvalidFormatError(
                "purchaseDate",
                f"Purchase date is not a calendar date: {value!r}",
                details={"error": str(e)}
            )

    def _parse_time(self, value: str) -> time:
        """Parse 24-hour HH:MM"""
        if value == "":
            raise EmptyFieldError("purchaseTime", "Purchase time is empty")

        match = self.TIME_PATTERN.fullmatch(value)
        if not match:
            raise InvalidFormatError(
                "purchaseTime",
                f"Purchase time must be 24-hour HH:MM, got {value!r}"
            )

        hour, minute = int(match.group(1)), int(match.group(2))
        return time(hour, minute)

    def _parse_amount(self, value: str, field: str) -> Decimal:
        """Parse a currency amount into an exact Decimal"""
        if not self.AMOUNT_PATTERN.fullmatch(value):
            raise InvalidNumberError(field, f"Invalid amount for {field}: {value!r}")

        try:
            return Decimal(value)
        except InvalidOperation as e:
            raise InvalidNumberError(
                field,
                f"Invalid amount for {field}: {value!r}",
                details={"error": str(e)}
            )

    def _parse_items(self, raw_items: List[ItemRequest]) -> List[Item]:
        if len(raw_items) < 1:
            raise TooFewItemsError("items", "Receipt must contain at least one item")

        items = []
        for index, raw_item in enumerate(raw_items):
            price = self._parse_amount(raw_item.price, field=f"items[{index}].price")
            items.append(Item(short_description=raw_item.short_description, price=price))

        logger.debug("Validated receipt items", items_count=len(items))
        return items
