from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .money import Money

OrderStatus = Literal["Pending", "Processing", "Completed", "Delivered", "Cancelled"]


class OrderDetailRequest(BaseModel):
    """One line of a create-order request, in the order API's field names."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    service_id: str = Field(alias="id_service", description="Service performed")
    goods_id: Optional[str] = Field(default=None, alias="id_goods", description="Goods item bundled with the service")
    quantity: int = Field(gt=0, description="Quantity")
    price: Money = Field(description="Unit price")
    sub_total: Money = Field(alias="subTotal", description="price * quantity")
    note: Optional[str] = Field(default=None, description="Free-text note")


class CreateLaundryOrderRequest(BaseModel):
    """Payload accepted by the external create-order endpoint."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    store_id: str = Field(alias="id_store")
    customer_id: str = Field(alias="id_customer")
    staff_id: str = Field(alias="id_staff")
    received_date: datetime = Field(alias="receivedDate")
    returned_date: Optional[datetime] = Field(default=None, alias="returnedDate")
    pickup_address: Optional[str] = Field(default=None, alias="pickupAddress")
    delivery_address: Optional[str] = Field(default=None, alias="deliveryAddress")
    total_amount: Money = Field(alias="totalAmount")
    discount_amount: Money = Field(alias="discountAmount")
    amount_paid: Money = Field(alias="amountPaid")
    status: OrderStatus = Field(default="Pending")
    promotion_id: Optional[str] = Field(default=None, alias="promotionId")
    order_details: List[OrderDetailRequest] = Field(alias="orderDetails")

    def to_payload(self) -> dict:
        """JSON-ready dict using the API's field names."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
