from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from laundry_console.config import get_config
from laundry_console.data.models import CreateLaundryOrderRequest, OrderDetailRequest, OrderStatus
from laundry_console.logging import get_logger

from .errors import OrderValidationError, ValidationErrorKind
from .models import OrderSnapshot


def _default_status() -> str:
    return get_config().default_order_status


class OrderHeader(BaseModel):
    """Who and where of an order, chosen in the surrounding form."""
    model_config = ConfigDict(frozen=True)

    store_id: Optional[str] = Field(default=None, description="Store taking the order")
    customer_id: Optional[str] = Field(default=None, description="Customer placing the order")
    staff_id: Optional[str] = Field(default=None, description="Staff member receiving the order")
    received_date: datetime = Field(default_factory=datetime.now, description="When the laundry was received")
    returned_date: Optional[datetime] = Field(default=None, description="Expected return date")
    pickup_address: Optional[str] = Field(default=None, description="Pickup address")
    delivery_address: Optional[str] = Field(default=None, description="Delivery address")
    status: OrderStatus = Field(default_factory=_default_status, validate_default=True, description="Initial order status")

    def check(self) -> None:
        """Raise OrderValidationError for the first missing or inconsistent field."""
        if not (self.store_id or "").strip():
            raise OrderValidationError(ValidationErrorKind.STORE_REQUIRED, "Store is required")
        if not (self.customer_id or "").strip():
            raise OrderValidationError(ValidationErrorKind.CUSTOMER_REQUIRED, "Customer is required")
        if not (self.staff_id or "").strip():
            raise OrderValidationError(ValidationErrorKind.STAFF_REQUIRED, "Staff is required")
        if self.returned_date is not None and self.returned_date < self.received_date:
            raise OrderValidationError(
                ValidationErrorKind.INVALID_RETURN_DATE,
                "Expected return date cannot be before the received date",
            )


def build_create_request(snapshot: OrderSnapshot, header: OrderHeader) -> CreateLaundryOrderRequest:
    """Combine a finalized order with its header into the create-order payload."""
    header.check()

    details = [
        OrderDetailRequest(
            service_id=line.service_id,
            goods_id=line.goods_id,
            quantity=line.quantity,
            price=line.unit_price,
            sub_total=line.subtotal,
            note=line.note,
        )
        for line in snapshot.line_items
    ]
    request = CreateLaundryOrderRequest(
        store_id=header.store_id,
        customer_id=header.customer_id,
        staff_id=header.staff_id,
        received_date=header.received_date,
        returned_date=header.returned_date,
        pickup_address=header.pickup_address or None,
        delivery_address=header.delivery_address or None,
        total_amount=snapshot.total_amount,
        discount_amount=snapshot.discount_amount,
        amount_paid=snapshot.amount_paid,
        status=header.status,
        promotion_id=snapshot.selected_promotion_id,
        order_details=details,
    )
    get_logger(__name__).info(
        f"Built create-order request for customer {header.customer_id} at store {header.store_id}: "
        f"{len(details)} line(s), amount paid {snapshot.amount_paid}"
    )
    return request
