from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class StringList(BaseModel):
    """Generic container for lists of unique string values."""
    values: List[str] = Field(description="List of unique string values")
