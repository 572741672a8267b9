from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from receipt_processor.api.dependencies import get_receipt_service
from receipt_processor.infrastructure.receipt_store import ReceiptStore
from receipt_processor.main import app
from receipt_processor.models.requests import ReceiptRequest
from receipt_processor.services.points_engine import PointsEngine
from receipt_processor.services.receipt_service import ReceiptService
from receipt_processor.services.receipt_validator import ReceiptValidator


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_payload() -> dict:
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_payload() -> dict:
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def validator() -> ReceiptValidator:
    return ReceiptValidator()


@pytest.fixture
def engine() -> PointsEngine:
    return PointsEngine()


@pytest.fixture
def make_receipt(validator):
    """Build a validated receipt from a payload dict, overriding fields."""
    def _make(**overrides):
        payload = copy.deepcopy(TARGET_RECEIPT)
        payload.update(overrides)
        return validator.validate(ReceiptRequest.model_validate(payload))
    return _make


@pytest.fixture
def receipt_service(validator, engine) -> ReceiptService:
    return ReceiptService(validator=validator, points_engine=engine, store=ReceiptStore())


@pytest.fixture
def client(receipt_service):
    app.dependency_overrides[get_receipt_service] = lambda: receipt_service
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
