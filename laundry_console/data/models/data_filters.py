from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field


class GoodsFilters(BaseModel):
    """Filters for the goods catalog."""
    category: Optional[str | list[str]] = Field(default=None, description="Category filter (single category or list of categories)")
    store_id: Optional[str] = Field(default=None, description="Only goods held by this store")
    active_only: bool = Field(default=False, description="Only goods whose status is active")


class PromotionFilters(BaseModel):
    """Filters for the promotion catalog."""
    kind: Optional[Literal["Percentage", "Cash"]] = Field(default=None, description="Promotion type filter")
    active_only: bool = Field(default=False, description="Only promotions whose status is enabled")
    on_date: Optional[date] = Field(default=None, description="Only promotions enabled and running on this day")
