from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional


class ValidationErrorKind(str, Enum):
    """Why an order-composition operation was rejected."""

    # Pending line item
    INVALID_QUANTITY = "InvalidQuantity"
    INVALID_PRICE = "InvalidPrice"
    SERVICE_REQUIRED = "ServiceRequired"
    SERVICE_NOT_FOUND = "ServiceNotFound"
    GOODS_NOT_FOUND = "GoodsNotFound"

    # Promotion
    PROMOTION_NOT_FOUND = "PromotionNotFound"

    # Finalize
    EMPTY_ORDER = "EmptyOrder"
    NON_POSITIVE_PAYMENT = "NonPositivePayment"

    # Order header
    STORE_REQUIRED = "StoreRequired"
    CUSTOMER_REQUIRED = "CustomerRequired"
    STAFF_REQUIRED = "StaffRequired"
    INVALID_RETURN_DATE = "InvalidReturnDate"


class OrderValidationError(Exception):
    """
    A recoverable, user-facing rejection of an order operation.

    The operation that raised it has not changed any state, so the caller can
    show `str(error)` next to the form and keep the editing session going.
    """

    kind: ValidationErrorKind
    message: str
    details: Optional[Mapping[str, Any]] = None

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"OrderValidationError(kind={self.kind.value!r}, message={self.message!r})"
