"""
Pydantic models for incoming requests

Fields stay raw strings so that the validator decides what is invalid.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ItemRequest(BaseModel):
    """Raw receipt line item"""
    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(
        "",
        alias="shortDescription",
        description="Short product description"
    )
    price: str = Field("", description="Price paid for the item, e.g. 6.49")


class ReceiptRequest(BaseModel):
    """Raw receipt as submitted by the client"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "retailer": "Target",
                "purchaseDate": "2022-01-01",
                "purchaseTime": "13:01",
                "items": [
                    {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
                    {"shortDescription": "Emils Cheese Pizza", "price": "12.25"}
                ],
                "total": "18.74"
            }
        }
    )

    retailer: str = Field("", description="Name of the retailer")
    purchase_date: str = Field("", alias="purchaseDate", description="Purchase date, YYYY-MM-DD")
    purchase_time: str = Field("", alias="purchaseTime", description="Purchase time, 24h HH:MM")
    total: str = Field("", description="Total amount paid, e.g. 35.35")
    items: List[ItemRequest] = Field(default_factory=list, description="Purchased items")
