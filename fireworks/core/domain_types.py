"""Domain Types — constants and tags shared by every aggregate.

Invariants:
    - Default values are the single source of truth for launch defaults
    - WARNING_THRESHOLD is a percentage of capacity (0-100 scale)
    - Every show carries exactly one ShowKind

Design Decisions:
    - NewType for vendor names: zero runtime cost, type-checker support
    - str Enum for ShowKind: serializes to JSON without a custom encoder
"""

from enum import Enum
from typing import NewType

VendorName = NewType("VendorName", str)

DEFAULT_DURATION: int = 1
DEFAULT_COST: float = 20.0

WARNING_THRESHOLD: int = 80

DEFAULT_SHOW_NAME: str = "test"
DEFAULT_COMPANY_SHOW_NAME: str = "company"
UNKNOWN_VENDOR: VendorName = VendorName("UNKNOWN")

# Vendor bills at or above the threshold are billed at the factor
VOLUME_DISCOUNT_THRESHOLD: float = 100.0
VOLUME_DISCOUNT_FACTOR: float = 0.95


class ShowKind(str, Enum):
    """Show variant tag. Town dispatches vendor-tagged launches on it."""
    PLAIN = "plain"
    VENDOR_TAGGED = "vendor_tagged"
