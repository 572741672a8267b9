"""
Enums for type safety
"""
from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reasons a receipt is rejected"""
    EMPTY_FIELD = "empty_field"
    INVALID_FORMAT = "invalid_format"  # Date or time layout
    INVALID_NUMBER = "invalid_number"  # Total or item price
    TOO_FEW_ITEMS = "too_few_items"


class ScoringRule(str, Enum):
    """Point rules applied to a valid receipt"""
    RETAILER_NAME = "retailer_name"
    ODD_DAY = "odd_day"
    AFTERNOON_PURCHASE = "afternoon_purchase"
    ROUND_TOTAL = "round_total"
    QUARTER_TOTAL = "quarter_total"
    ITEM_PAIRS = "item_pairs"
    ITEM_DESCRIPTION = "item_description"
