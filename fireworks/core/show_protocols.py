"""Show Protocols — the capability set every show variant provides.

Invariants:
    - Town only talks to shows through ShowLike
    - Vendor-tagged launches require ShowKind.VENDOR_TAGGED and VendorTaggedShowLike

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy between
      the plain and vendor-tagged variants
    - `kind` tag alongside the Protocol: runtime dispatch without isinstance on
      concrete classes
"""

from typing import Protocol

from fireworks.core.domain_types import ShowKind
from fireworks.core.firework import Firework


class ShowLike(Protocol):
    """Structural contract shared by Show and CompanyShow."""

    @property
    def kind(self) -> ShowKind: ...
    @property
    def name(self) -> str: ...
    @property
    def max_fireworks(self) -> int: ...
    @property
    def current_time(self) -> int: ...
    @property
    def fireworks(self) -> tuple[Firework, ...]: ...
    @property
    def warning_times(self) -> tuple[int, ...]: ...

    def add_firework(self, time: int, duration: int = ..., cost: float = ...) -> bool: ...
    def update(self, time: int) -> None: ...
    def get_fireworks_up(self) -> int: ...
    def get_fireworks_up_at(self, time: int) -> int: ...
    def has_warning(self) -> bool: ...
    def has_warning_at(self, time: int) -> bool: ...
    def get_total_warnings(self) -> int: ...
    def get_cost(self) -> float: ...


class VendorTaggedShowLike(ShowLike, Protocol):
    """Shows that attribute every firework to a vendor."""

    @property
    def vendor_bills(self) -> dict[str, float]: ...

    def add_firework(
        self, time: int, duration: int = ..., cost: float = ..., vendor: str = ...,
    ) -> bool: ...
