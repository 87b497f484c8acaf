# dealer_search/schemas/build.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional


class Vehicle(BaseModel):
    """One inventory vehicle. Read-only once constructed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    year: int
    make: str
    model: str
    trim: Optional[str] = None
    condition: Literal["new", "used", "certified"]
    final_url: str = Field(alias="finalUrl")
    city: Optional[str] = None


class BuildRequest(BaseModel):
    # Opaque key for the inventory provider; empty or missing is allowed
    dealershipUrl: Optional[str] = None
