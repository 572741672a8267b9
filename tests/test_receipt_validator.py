from datetime import date, time
from decimal import Decimal

import pytest

from receipt_processor.core.enums import ValidationErrorKind
from receipt_processor.core.exceptions import (
    EmptyFieldError,
    InvalidFormatError,
    InvalidNumberError,
    ReceiptValidationError,
    TooFewItemsError,
)
from receipt_processor.models.requests import ReceiptRequest


def _validate(validator, payload):
    return validator.validate(ReceiptRequest.model_validate(payload))


def test_valid_receipt_is_typed(validator, target_payload):
    receipt = _validate(validator, target_payload)

    assert receipt.retailer == "Target"
    assert receipt.purchase_date == date(2022, 1, 1)
    assert receipt.purchase_time == time(13, 1)
    assert receipt.total == Decimal("35.35")
    assert [item.price for item in receipt.items] == [
        Decimal("6.49"), Decimal("12.25"), Decimal("1.26"), Decimal("3.35"), Decimal("12.00")
    ]


@pytest.mark.parametrize(
    "field, value, error_type, kind",
    [
        ("retailer", "", EmptyFieldError, ValidationErrorKind.EMPTY_FIELD),
        ("purchaseDate", "", EmptyFieldError, ValidationErrorKind.EMPTY_FIELD),
        ("purchaseTime", "", EmptyFieldError, ValidationErrorKind.EMPTY_FIELD),
        ("total", "abc", InvalidNumberError, ValidationErrorKind.INVALID_NUMBER),
        ("items", [], TooFewItemsError, ValidationErrorKind.TOO_FEW_ITEMS),
    ],
)
def test_each_field_has_its_error_kind(validator, target_payload, field, value, error_type, kind):
    target_payload[field] = value

    with pytest.raises(error_type) as exc_info:
        _validate(validator, target_payload)

    assert exc_info.value.kind is kind
    assert exc_info.value.field == field
    assert exc_info.value.details["kind"] == kind.value


def test_missing_fields_are_reported_as_empty(validator):
    with pytest.raises(EmptyFieldError) as exc_info:
        _validate(validator, {})
    assert exc_info.value.field == "retailer"


@pytest.mark.parametrize(
    "value",
    ["2022/01/01", "01-01-2022", "2022-1-1", "2022-02-30", "2022-13-01", "2022-00-10", "20220101", " 2022-01-01", "2022-01-01\n"],
)
def test_invalid_dates(validator, target_payload, value):
    target_payload["purchaseDate"] = value
    with pytest.raises(InvalidFormatError) as exc_info:
        _validate(validator, target_payload)
    assert exc_info.value.field == "purchaseDate"


def test_leap_day_is_a_real_date(validator, target_payload):
    target_payload["purchaseDate"] = "2024-02-29"
    assert _validate(validator, target_payload).purchase_date == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["24:00", "12:60", "1:05", "13:01:00", "1pm", "13.01", "ab:cd", "13:01\n"])
def test_invalid_times(validator, target_payload, value):
    target_payload["purchaseTime"] = value
    with pytest.raises(InvalidFormatError) as exc_info:
        _validate(validator, target_payload)
    assert exc_info.value.field == "purchaseTime"


@pytest.mark.parametrize("value, expected", [("00:00", time(0, 0)), ("23:59", time(23, 59))])
def test_time_bounds(validator, target_payload, value, expected):
    target_payload["purchaseTime"] = value
    assert _validate(validator, target_payload).purchase_time == expected


@pytest.mark.parametrize("value", ["", "abc", "-1.00", "1.234", "1e3", "1,00", ".50", "12.", "NaN", "Infinity", " 1.00", "35.35\n"])
def test_invalid_totals(validator, target_payload, value):
    target_payload["total"] = value
    with pytest.raises(InvalidNumberError) as exc_info:
        _validate(validator, target_payload)
    assert exc_info.value.field == "total"


@pytest.mark.parametrize("value, expected", [("12", Decimal("12")), ("12.5", Decimal("12.5")), ("0.10", Decimal("0.10"))])
def test_valid_totals(validator, target_payload, value, expected):
    target_payload["total"] = value
    assert _validate(validator, target_payload).total == expected


def test_invalid_item_price_names_the_item(validator, target_payload):
    target_payload["items"][2]["price"] = "1.2.6"
    with pytest.raises(InvalidNumberError) as exc_info:
        _validate(validator, target_payload)
    assert exc_info.value.field == "items[2].price"


def test_first_failure_wins(validator, target_payload):
    # retailer is checked before the date and the total
    target_payload.update(retailer="", purchaseDate="bad", total="bad", items=[])
    with pytest.raises(EmptyFieldError):
        _validate(validator, target_payload)

    target_payload["retailer"] = "Target"
    with pytest.raises(InvalidFormatError):
        _validate(validator, target_payload)


def test_total_checked_before_items(validator, target_payload):
    target_payload.update(total="bad", items=[])
    with pytest.raises(InvalidNumberError):
        _validate(validator, target_payload)


def test_validation_errors_share_a_base(validator, target_payload):
    target_payload["items"] = []
    with pytest.raises(ReceiptValidationError):
        _validate(validator, target_payload)


def test_any_retailer_characters_allowed(validator, target_payload):
    target_payload["retailer"] = "  ***  "
    assert _validate(validator, target_payload).retailer == "  ***  "


def test_trailing_newline_item_price_rejected(validator, target_payload):
    target_payload["items"][0]["price"] = "6.49\n"
    with pytest.raises(InvalidNumberError) as exc_info:
        _validate(validator, target_payload)
    assert exc_info.value.field == "items[0].price"


def test_large_amounts_are_kept_exact(validator, target_payload):
    target_payload["total"] = "10000000000000000000000000000.05"
    receipt = _validate(validator, target_payload)
    assert receipt.total == Decimal("10000000000000000000000000000.05")


def test_validated_items_are_immutable(validator, target_payload):
    receipt = _validate(validator, target_payload)
    assert isinstance(receipt.items, tuple)
    with pytest.raises(AttributeError):
        receipt.items.append(receipt.items[0])
