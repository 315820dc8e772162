"""Status Schemas — Pydantic models for show and town snapshots.

Invariants:
    - Counts and costs are non-negative
    - capacity_percent is on the 0-100 scale with one decimal place
    - VendorBill.total is undiscounted

Design Decisions:
    - Built from core.show_stats dicts via model_validate, so the core stays
      free of pydantic
"""

from pydantic import BaseModel, Field

from fireworks.core.domain_types import ShowKind


class VendorBill(BaseModel):
    """Undiscounted running bill for one vendor."""
    vendor: str = Field(min_length=1)
    total: float = Field(ge=0)


class ShowStatus(BaseModel):
    """One show at its own current time."""
    name: str
    kind: ShowKind
    current_time: int
    max_fireworks: int
    fireworks_up: int = Field(ge=0)
    capacity_percent: float = Field(ge=0)
    has_warning: bool
    total_warnings: int = Field(ge=0)
    total_fireworks: int = Field(ge=0)
    cost: float = Field(ge=0)
    vendor_bills: list[VendorBill] = Field(default_factory=list)


class TownStatus(BaseModel):
    """A town and all of its shows."""
    current_time: int
    fireworks_up: int = Field(ge=0)
    has_warning: bool
    total_warnings: int = Field(ge=0)
    total_cost: float = Field(ge=0)
    shows: list[ShowStatus] = Field(default_factory=list)
