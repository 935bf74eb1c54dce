from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class StoreResponse(BaseModel):
    """Response model for store data."""
    store_id: str = Field(validation_alias=AliasChoices("store_id", "_id"), description="Unique store identifier")
    name: str = Field(description="Store name")
    phone_number: Optional[str] = Field(default=None, validation_alias=AliasChoices("phone_number", "phoneNumber"), description="Store phone number")
    address: Optional[str] = Field(default=None, description="Store address")
    status: bool = Field(default=True, description="Whether the store is open")
