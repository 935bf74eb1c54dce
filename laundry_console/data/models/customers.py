from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class CustomerResponse(BaseModel):
    """Response model for customer data."""
    customer_id: str = Field(validation_alias=AliasChoices("customer_id", "_id"), description="Unique customer identifier")
    name: str = Field(description="Customer name")
    phone_number: str = Field(default="", validation_alias=AliasChoices("phone_number", "phoneNumber"), description="Customer phone number")
    email: Optional[str] = Field(default=None, description="Customer email")
    address: Optional[str] = Field(default=None, description="Customer address")
    customer_type: Optional[str] = Field(default=None, description="Customer tier")
