from .catalog import GoodsCatalog, PromotionCatalog, ServiceCatalog
from .engine import OrderPricingEngine
from .errors import OrderValidationError, ValidationErrorKind
from .models import LineItem, OrderComposition, OrderSnapshot
from .submission import OrderHeader, build_create_request

__all__ = [
    "GoodsCatalog",
    "PromotionCatalog",
    "ServiceCatalog",
    "OrderPricingEngine",
    "OrderValidationError",
    "ValidationErrorKind",
    "LineItem",
    "OrderComposition",
    "OrderSnapshot",
    "OrderHeader",
    "build_create_request",
]
