"""
Points scoring for validated receipts

Every rule is a pure function of the receipt. The score is the sum of all
rule contributions and is recomputed on each call. Money rules work on exact
integer cents, so amounts of any size are scored without rounding.
"""
from datetime import time
from decimal import Decimal, localcontext
from typing import Callable, Dict, Tuple

from receipt_processor.models.domain import Receipt
from receipt_processor.core.enums import ScoringRule
from receipt_processor.core.logging import get_logger

logger = get_logger(__name__)

AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)
CENTS_PER_UNIT = 100
QUARTER_CENTS = 25
# ceil(0.2 * price) == ceil(cents / 500)
DESCRIPTION_CENTS_PER_POINT = 500

Rule = Callable[[Receipt], int]


def to_cents(amount: Decimal) -> int:
    """
    Exact amount in minor units

    Validated amounts carry at most two fractional digits, so the product is
    integral. Precision grows with the amount, the default context would round.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 3)
        return int(amount * CENTS_PER_UNIT)


def retailer_name_points(receipt: Receipt) -> int:
    """One point per letter or digit in the retailer name"""
    return sum(1 for char in receipt.retailer if char.isalnum())


def odd_day_points(receipt: Receipt) -> int:
    return 6 if receipt.purchase_date.day % 2 == 1 else 0


def afternoon_purchase_points(receipt: Receipt) -> int:
    """10 points between 14:00 and 16:00, both ends excluded"""
    if AFTERNOON_START < receipt.purchase_time < AFTERNOON_END:
        return 10
    return 0


def round_total_points(receipt: Receipt) -> int:
    return 50 if to_cents(receipt.total) % CENTS_PER_UNIT == 0 else 0


def quarter_total_points(receipt: Receipt) -> int:
    return 25 if to_cents(receipt.total) % QUARTER_CENTS == 0 else 0


def item_pairs_points(receipt: Receipt) -> int:
    return 5 * (len(receipt.items) // 2)


def item_description_points(receipt: Receipt) -> int:
    """
    ceil(0.2 * price) for every item whose space-trimmed description length
    is a multiple of 3. An all-space description trims to length 0 and counts.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip(" ")) % 3 == 0:
            points += -(-to_cents(item.price) // DESCRIPTION_CENTS_PER_POINT)
    return points


RULES: Tuple[Tuple[ScoringRule, Rule], ...] = (
    (ScoringRule.RETAILER_NAME, retailer_name_points),
    (ScoringRule.ODD_DAY, odd_day_points),
    (ScoringRule.AFTERNOON_PURCHASE, afternoon_purchase_points),
    (ScoringRule.ROUND_TOTAL, round_total_points),
    (ScoringRule.QUARTER_TOTAL, quarter_total_points),
    (ScoringRule.ITEM_PAIRS, item_pairs_points),
    (ScoringRule.ITEM_DESCRIPTION, item_description_points),
)


class PointsEngine:
    """Applies the scoring rules to a validated receipt"""

    def __init__(self, rules: Tuple[Tuple[ScoringRule, Rule], ...] = RULES):
        self.rules = rules

    def breakdown(self, receipt: Receipt) -> Dict[ScoringRule, int]:
        """
        Points per rule

        Args:
            receipt: Validated receipt

        Returns:
            Mapping of rule to its contribution
        """
        return {rule: apply(receipt) for rule, apply in self.rules}

    def score(self, receipt: Receipt) -> int:
        """
        Total points for a receipt

        Args:
            receipt: Validated receipt

        Returns:
            Sum of all rule contributions
        """
        contributions = self.breakdown(receipt)
        points = sum(contributions.values())

        logger.debug(
            "Receipt scored",
            points=points,
            breakdown={rule.value: value for rule, value in contributions.items()}
        )
        return points
