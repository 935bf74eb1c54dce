# laundry_console/data/interface.py
from __future__ import annotations

from typing import List, Optional, Protocol

from .models import (
    # Filter classes
    GoodsFilters,
    PromotionFilters,
    # Response models
    ServiceResponse,
    GoodsResponse,
    PromotionResponse,
    StoreResponse,
    CustomerResponse,
    StaffResponse,
    # List response models
    StringList,
)


# ---- Catalog access protocol ----

class CatalogAccess(Protocol):
    """
    Read-only contract for the catalogs the order-creation flow consults.

    Catalogs are fetched once when the flow opens and treated as immutable
    lookup tables for the rest of the editing session.
    """

    # Priced catalogs consumed by the pricing engine

    def list_services(self) -> List[ServiceResponse]:
        """List all laundry services."""
        ...

    def list_goods(self, filters: Optional[GoodsFilters] = None) -> List[GoodsResponse]:
        """List goods items, optionally filtered."""
        ...

    def list_promotions(self, filters: Optional[PromotionFilters] = None) -> List[PromotionResponse]:
        """List promotions, optionally filtered."""
        ...

    # Lookups used to fill the order header

    def list_stores(self) -> List[StoreResponse]:
        """List all stores."""
        ...

    def list_customers(self) -> List[CustomerResponse]:
        """List all customers."""
        ...

    def list_staff(self, store_id: Optional[str] = None) -> List[StaffResponse]:
        """List staff, optionally only those working at `store_id`."""
        ...

    def list_goods_categories(self) -> StringList:
        """List all goods categories."""
        ...
