from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional, Tuple, Union

from laundry_console.config import get_config
from laundry_console.data.models import GoodsResponse, PromotionResponse, ServiceResponse
from laundry_console.logging import get_logger

from .catalog import GoodsCatalog, PromotionCatalog, ServiceCatalog
from .discount import ZERO, compute_amount_paid, compute_discount
from .errors import OrderValidationError, ValidationErrorKind
from .models import LineItem, OrderComposition, OrderSnapshot


class OrderPricingEngine:
    """Builds one laundry order: line items, promotion, and payable amount.

    The engine owns a pending line-item draft and the order composition. Every
    mutating operation either raises `OrderValidationError` and leaves both
    untouched, or ends by recomputing the subtotal, total, discount and amount
    paid from scratch.
    """

    def __init__(
        self,
        services: Union[ServiceCatalog, Iterable[ServiceResponse]],
        goods: Union[GoodsCatalog, Iterable[GoodsResponse]] = (),
        promotions: Union[PromotionCatalog, Iterable[PromotionResponse]] = (),
        clamp_amount_paid: Optional[bool] = None,
        max_amount: Optional[Decimal] = None,
    ) -> None:
        self.logger = get_logger(__name__)
        self.services = services if isinstance(services, ServiceCatalog) else ServiceCatalog(services)
        self.goods = goods if isinstance(goods, GoodsCatalog) else GoodsCatalog(goods)
        self.promotions = promotions if isinstance(promotions, PromotionCatalog) else PromotionCatalog(promotions)
        config = get_config()
        if clamp_amount_paid is None:
            clamp_amount_paid = config.clamp_amount_paid
        self.clamp_amount_paid = clamp_amount_paid
        self.max_amount = Decimal(max_amount) if max_amount is not None else config.max_amount

        self._pending = LineItem()
        self._composition = OrderComposition()

    # ---------- read-only state ----------

    @property
    def pending(self) -> LineItem:
        return self._pending

    @property
    def composition(self) -> OrderComposition:
        return self._composition

    @property
    def line_items(self) -> Tuple[LineItem, ...]:
        return self._composition.line_items

    @property
    def total_amount(self) -> Decimal:
        return self._composition.total_amount

    @property
    def discount_amount(self) -> Decimal:
        return self._composition.discount_amount

    @property
    def amount_paid(self) -> Decimal:
        return self._composition.amount_paid

    @property
    def selected_promotion(self) -> Optional[PromotionResponse]:
        return self.promotions.get(self._composition.selected_promotion_id)

    # ---------- pending line item ----------

    def select_service(self, service_id: Optional[str]) -> LineItem:
        """Pick the draft's service and take its catalog price.

        An empty `service_id` clears the service and keeps the current price.
        """
        if not service_id:
            self._pending = self._pending.model_copy(update={"service_id": None})
            return self._pending

        if service_id not in self.services:
            raise self._reject(
                ValidationErrorKind.SERVICE_NOT_FOUND,
                f"Unknown service: {service_id}",
                service_id=service_id,
            )

        price = self.services.price_of(service_id)
        if not self._fits(self._pending.quantity, price):
            raise self._reject(
                ValidationErrorKind.INVALID_PRICE,
                f"Subtotal cannot exceed {self.max_amount}",
                service_id=service_id,
                price=price,
            )

        self._pending = self._pending.model_copy(update={"service_id": service_id, "unit_price": price})
        self.logger.debug(
            f"Draft service {service_id} at {price} x {self._pending.quantity} = {self._pending.subtotal}"
        )
        return self._pending

    def set_pending_quantity(self, quantity: Any) -> LineItem:
        value = self._parse_quantity(quantity)
        if value is None:
            raise self._reject(
                ValidationErrorKind.INVALID_QUANTITY,
                "Quantity must be a positive number",
                quantity=quantity,
            )
        if not self._fits(value, self._pending.unit_price):
            raise self._reject(
                ValidationErrorKind.INVALID_QUANTITY,
                f"Subtotal cannot exceed {self.max_amount}",
                quantity=quantity,
            )
        self._pending = self._pending.model_copy(update={"quantity": int(value)})
        return self._pending

    def set_pending_unit_price(self, price: Any) -> LineItem:
        value = self._parse_price(price)
        if value is None:
            raise self._reject(
                ValidationErrorKind.INVALID_PRICE,
                "Price must be a positive number",
                price=price,
            )
        if not self._fits(self._pending.quantity, value):
            raise self._reject(
                ValidationErrorKind.INVALID_PRICE,
                f"Subtotal cannot exceed {self.max_amount}",
                price=price,
            )
        self._pending = self._pending.model_copy(update={"unit_price": value})
        return self._pending

    def select_pending_goods(self, goods_id: Optional[str]) -> LineItem:
        if goods_id and goods_id not in self.goods:
            raise self._reject(
                ValidationErrorKind.GOODS_NOT_FOUND,
                f"Unknown goods item: {goods_id}",
                goods_id=goods_id,
            )
        self._pending = self._pending.model_copy(update={"goods_id": goods_id or None})
        return self._pending

    def set_pending_note(self, note: Optional[str]) -> LineItem:
        self._pending = self._pending.model_copy(update={"note": note or None})
        return self._pending

    def commit_pending_line_item(self) -> LineItem:
        """Append the draft to the order and start a fresh draft."""
        line = self._pending
        if not line.service_id:
            raise self._reject(
                ValidationErrorKind.SERVICE_REQUIRED,
                "Service is required for order detail",
            )

        self._composition = self._recompute(
            self._composition.line_items + (line,),
            self._composition.selected_promotion_id,
        )
        self._pending = LineItem()
        self.logger.debug(
            f"Added line {len(self._composition.line_items) - 1}: service {line.service_id} "
            f"subtotal {line.subtotal}; total now {self._composition.total_amount}"
        )
        return line

    # ---------- committed lines ----------

    def remove_line_item(self, index: int) -> LineItem:
        """Remove the committed line at `index`.

        `index` must address an existing line; anything else is a caller bug
        and raises IndexError.
        """
        items = self._composition.line_items
        if not 0 <= index < len(items):
            raise IndexError(f"Line item index {index} out of range for {len(items)} line(s)")

        removed = items[index]
        self._composition = self._recompute(
            items[:index] + items[index + 1:],
            self._composition.selected_promotion_id,
        )
        self.logger.debug(f"Removed line {index}; total now {self._composition.total_amount}")
        return removed

    # ---------- promotion ----------

    def select_promotion(self, promotion_id: Optional[str]) -> OrderComposition:
        """Apply `promotion_id` to the order, or clear the promotion with None."""
        if promotion_id and promotion_id not in self.promotions:
            raise self._reject(
                ValidationErrorKind.PROMOTION_NOT_FOUND,
                f"Unknown promotion: {promotion_id}",
                promotion_id=promotion_id,
            )

        self._composition = self._recompute(self._composition.line_items, promotion_id or None)
        self.logger.debug(
            f"Promotion {promotion_id or 'none'}: discount {self._composition.discount_amount}, "
            f"amount paid {self._composition.amount_paid}"
        )
        return self._composition

    # ---------- finalize ----------

    def finalize(self) -> OrderSnapshot:
        """Snapshot the order for submission. The engine state is left as is."""
        composition = self._composition
        if not composition.line_items:
            raise self._reject(
                ValidationErrorKind.EMPTY_ORDER,
                "At least one service is required",
            )
        if composition.amount_paid <= ZERO:
            raise self._reject(
                ValidationErrorKind.NON_POSITIVE_PAYMENT,
                "Amount paid must be greater than zero",
                amount_paid=composition.amount_paid,
            )

        snapshot = OrderSnapshot(
            line_items=composition.line_items,
            selected_promotion_id=composition.selected_promotion_id,
            total_amount=composition.total_amount,
            discount_amount=composition.discount_amount,
            amount_paid=composition.amount_paid,
        )
        self.logger.info(
            f"Finalized order: {len(snapshot.line_items)} line(s), total {snapshot.total_amount}, "
            f"discount {snapshot.discount_amount}, paid {snapshot.amount_paid}"
        )
        return snapshot

    def reset(self) -> None:
        """Discard the order and the draft, e.g. after a successful submission."""
        self._pending = LineItem()
        self._composition = OrderComposition()

    # ---------- helpers ----------

    def _recompute(self, line_items: Tuple[LineItem, ...], promotion_id: Optional[str]) -> OrderComposition:
        total = sum((line.subtotal for line in line_items), ZERO)
        discount = compute_discount(total, self.promotions.get(promotion_id))
        paid = compute_amount_paid(total, discount, clamp=self.clamp_amount_paid)
        return OrderComposition(
            line_items=line_items,
            selected_promotion_id=promotion_id,
            total_amount=total,
            discount_amount=discount,
            amount_paid=paid,
        )

    def _reject(self, kind: ValidationErrorKind, message: str, **details: Any) -> OrderValidationError:
        self.logger.warning(f"{kind.value}: {message}")
        return OrderValidationError(kind, message, details or None)

    @staticmethod
    def _to_decimal(value: Any) -> Optional[Decimal]:
        if isinstance(value, bool) or value is None:
            return None
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            return None
        if not number.is_finite():
            return None
        return number

    def _fits(self, quantity: Union[int, Decimal], unit_price: Decimal) -> bool:
        # Bound each factor first so the product stays inside the decimal context
        if quantity > self.max_amount or unit_price > self.max_amount:
            return False
        return quantity * unit_price <= self.max_amount

    @classmethod
    def _parse_quantity(cls, value: Any) -> Optional[Decimal]:
        number = cls._to_decimal(value)
        if number is None or number <= 0 or number != number.to_integral_value():
            return None
        return number

    @classmethod
    def _parse_price(cls, value: Any) -> Optional[Decimal]:
        number = cls._to_decimal(value)
        if number is None or number <= 0:
            return None
        return number
