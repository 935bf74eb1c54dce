from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator

from .money import Money


class PromotionResponse(BaseModel):
    """Response model for promotion data.

    Percentage promotions carry a value in (0, 100]; Cash promotions carry a
    non-negative amount.
    """
    promotion_id: str = Field(validation_alias=AliasChoices("promotion_id", "_id"), description="Unique promotion identifier")
    name: str = Field(description="Promotion name")
    description: str = Field(default="", description="Promotion description")
    kind: Literal["Percentage", "Cash"] = Field(validation_alias=AliasChoices("kind", "type"), description="Type of promotion")
    value: Money = Field(description="Percentage (0-100] or cash amount")
    start_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("start_date", "startDate"), description="First day the promotion applies")
    end_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("end_date", "endDate"), description="Last day the promotion applies")
    status: bool = Field(default=True, description="Whether the promotion is enabled")

    @model_validator(mode="after")
    def _check_value(self) -> "PromotionResponse":
        if self.kind == "Percentage" and not (0 < self.value <= 100):
            raise ValueError(f"Percentage promotion value must be in (0, 100], got {self.value}")
        if self.kind == "Cash" and self.value < 0:
            raise ValueError(f"Cash promotion value must be >= 0, got {self.value}")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("Promotion end_date precedes start_date")
        return self

    def is_available(self, on: date) -> bool:
        """True when the promotion is enabled and its date window contains `on`."""
        if not self.status:
            return False
        if self.start_date and on < self.start_date:
            return False
        if self.end_date and on > self.end_date:
            return False
        return True
