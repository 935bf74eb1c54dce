from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from .money import Money


class ServiceResponse(BaseModel):
    """Response model for laundry service data."""
    service_id: str = Field(validation_alias=AliasChoices("service_id", "_id"), description="Unique service identifier")
    name: str = Field(description="Service name")
    price: Money = Field(ge=0, description="Current unit price of the service")
    description: str = Field(default="", description="Service description")
