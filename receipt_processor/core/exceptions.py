"""
Custom exceptions for the receipt processor
"""
from receipt_processor.core.enums import ValidationErrorKind


class ReceiptProcessorException(Exception):
    """Base exception for the receipt processor"""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ReceiptValidationError(ReceiptProcessorException):
    """Receipt rejected by validation"""
    kind: ValidationErrorKind = None

    def __init__(self, field: str, message: str, details: dict = None):
        self.field = field
        details = {"field": field, "kind": self.kind.value, **(details or {})}
        super().__init__(message, details=details)


class EmptyFieldError(ReceiptValidationError):
    """A required string field is blank"""
    kind = ValidationErrorKind.EMPTY_FIELD


class InvalidFormatError(ReceiptValidationError):
    """Date or time does not match the fixed layout"""
    kind = ValidationErrorKind.INVALID_FORMAT


class InvalidNumberError(ReceiptValidationError):
    """Total or price is not a well-formed decimal amount"""
    kind = ValidationErrorKind.INVALID_NUMBER


class TooFewItemsError(ReceiptValidationError):
    """Receipt has no items"""
    kind = ValidationErrorKind.TOO_FEW_ITEMS


class ReceiptNotFoundError(ReceiptProcessorException):
    """No receipt stored under the identifier"""
    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__(
            f"No receipt found for id {receipt_id}",
            details={"receipt_id": receipt_id}
        )


class ConfigurationError(ReceiptProcessorException):
    """Configuration error"""
    pass
