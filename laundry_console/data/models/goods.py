from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from .money import Money


class GoodsResponse(BaseModel):
    """Response model for goods data."""
    goods_id: str = Field(validation_alias=AliasChoices("goods_id", "_id"), description="Unique goods identifier")
    name: str = Field(description="Goods name")
    category: str = Field(default="", description="Goods category")
    quantity: int = Field(default=0, description="Quantity in stock")
    price: Money = Field(ge=0, description="Unit price of the goods item")
    unit: str = Field(default="", description="Unit of measure")
    status: bool = Field(default=True, description="Whether the goods item is active")
    store_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("store_id", "id_store"), description="Store holding the goods item")
