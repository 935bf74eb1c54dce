from __future__ import annotations

from decimal import Decimal
from typing import Optional

from laundry_console.data.models import PromotionResponse

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_discount(total: Decimal, promotion: Optional[PromotionResponse]) -> Decimal:
    """Discount granted by `promotion` on an order totalling `total`.

    A Cash promotion grants its full value even when it exceeds the total;
    the shortfall shows up as a non-positive amount paid.
    """
    if promotion is None:
        return ZERO
    if promotion.kind == "Percentage":
        return total * (promotion.value / HUNDRED)
    if promotion.kind == "Cash":
        return promotion.value
    raise ValueError(f"Unknown promotion kind: {promotion.kind}")


def compute_amount_paid(total: Decimal, discount: Decimal, clamp: bool = False) -> Decimal:
    amount = total - discount
    if clamp and amount < ZERO:
        return ZERO
    return amount
