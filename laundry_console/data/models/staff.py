from __future__ import annotations

from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field


class StaffResponse(BaseModel):
    """Response model for staff data."""
    staff_id: str = Field(validation_alias=AliasChoices("staff_id", "_id"), description="Unique staff identifier")
    store_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("store_id", "id_store"), description="Store the staff member works at")
    name: str = Field(description="Staff name")
    phone_number: str = Field(default="", validation_alias=AliasChoices("phone_number", "phoneNumber"), description="Staff phone number")
    role: Literal["ADMIN", "STAFF"] = Field(default="STAFF", description="Staff role")
    status: bool = Field(default=True, description="Whether the staff member is active")
