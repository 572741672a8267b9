"""
Domain models - validated business entities
"""
from datetime import date, time
from decimal import Decimal
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Validated receipt line item"""
    model_config = ConfigDict(frozen=True)

    short_description: str = Field(..., description="Description as submitted, untrimmed")
    price: Decimal = Field(..., description="Item price")


class Receipt(BaseModel):
    """Validated receipt, ready for scoring"""
    model_config = ConfigDict(frozen=True)

    retailer: str = Field(..., min_length=1, description="Retailer name")
    purchase_date: date = Field(..., description="Purchase date")
    purchase_time: time = Field(..., description="Purchase time, minute precision")
    total: Decimal = Field(..., description="Total amount paid")
    items: Tuple[Item, ...] = Field(..., min_length=1, description="Purchased items in receipt order")


class StoredReceipt(BaseModel):
    """Receipt together with the points it earned"""
    model_config = ConfigDict(frozen=True)

    receipt: Receipt
    points: int = Field(..., ge=0, description="Awarded points")
