from .data_filters import (
    GoodsFilters,
    PromotionFilters,
)

from .money import Money
from .services import ServiceResponse
from .goods import GoodsResponse
from .promotions import PromotionResponse
from .stores import StoreResponse
from .customers import CustomerResponse
from .staff import StaffResponse
from .laundry_orders import (
    OrderStatus,
    OrderDetailRequest,
    CreateLaundryOrderRequest,
)
from .list_response import StringList

__all__ = [
    # Filter classes
    "GoodsFilters",
    "PromotionFilters",
    # Shared types
    "Money",
    "OrderStatus",
    # Response models
    "ServiceResponse",
    "GoodsResponse",
    "PromotionResponse",
    "StoreResponse",
    "CustomerResponse",
    "StaffResponse",
    # Request models
    "OrderDetailRequest",
    "CreateLaundryOrderRequest",
    # List response models
    "StringList",
]
