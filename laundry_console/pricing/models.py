from __future__ import annotations

from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from laundry_console.data.models import Money


class LineItem(BaseModel):
    """One service performed for the order, optionally bundled with a goods item.

    `subtotal` is derived from `unit_price` and `quantity` and cannot be
    supplied by a caller.
    """
    model_config = ConfigDict(frozen=True)

    service_id: Optional[str] = Field(default=None, description="Service performed; None only on an empty draft")
    goods_id: Optional[str] = Field(default=None, description="Goods item bundled with the service")
    quantity: int = Field(default=1, gt=0, description="Number of units")
    unit_price: Money = Field(default=Decimal("0"), ge=0, description="Price per unit")
    note: Optional[str] = Field(default=None, description="Free-text note")

    @computed_field
    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


class OrderComposition(BaseModel):
    """The lines and promotion of the order being built, with derived amounts.

    Built only by the pricing engine's recomputation step, so the amounts
    always agree with `line_items` and `selected_promotion_id`.
    """
    model_config = ConfigDict(frozen=True)

    line_items: Tuple[LineItem, ...] = ()
    selected_promotion_id: Optional[str] = None
    total_amount: Money = Decimal("0")
    discount_amount: Money = Decimal("0")
    amount_paid: Money = Decimal("0")


class OrderSnapshot(OrderComposition):
    """Immutable, submission-ready copy of a finalized composition."""
