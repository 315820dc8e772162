"""Company Show — the vendor-tagged show variant with volume discounting.

Invariants:
    - Every accepted firework is attributed to exactly one vendor
      (UNKNOWN_VENDOR when the caller names none)
    - sum(vendor_bills) equals the undiscounted cost of all accepted fireworks
    - Vendor bills >= VOLUME_DISCOUNT_THRESHOLD are billed at VOLUME_DISCOUNT_FACTOR;
      the discount applies to the accumulated bill, never per firework
    - Status lines show undiscounted vendor bills (display and billing diverge)

Design Decisions:
    - Composes a Show instead of subclassing it: the timeline rules live in
      one place and both variants satisfy ShowLike structurally
"""

import logging
import threading

from fireworks.core.domain_types import (
    DEFAULT_COMPANY_SHOW_NAME,
    DEFAULT_COST,
    DEFAULT_DURATION,
    UNKNOWN_VENDOR,
    VOLUME_DISCOUNT_FACTOR,
    VOLUME_DISCOUNT_THRESHOLD,
    ShowKind,
)
from fireworks.core.enforce_launch import validate_launch_parameters
from fireworks.core.firework import Firework
from fireworks.core.format_status import format_company_show_status
from fireworks.core.show import Show

logger = logging.getLogger(__name__)


def discounted_bill(total: float) -> float:
    """Apply the volume discount to one vendor's accumulated bill."""
    if total >= VOLUME_DISCOUNT_THRESHOLD:
        return total * VOLUME_DISCOUNT_FACTOR
    return total


class CompanyShow:
    """Show whose fireworks are billed per vendor."""

    kind = ShowKind.VENDOR_TAGGED

    def __init__(self, max_fireworks: int, name: str = DEFAULT_COMPANY_SHOW_NAME) -> None:
        self._show = Show(max_fireworks, name)
        self._vendor_bills: dict[str, float] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._show.name

    @property
    def max_fireworks(self) -> int:
        return self._show.max_fireworks

    @property
    def current_time(self) -> int:
        return self._show.current_time

    @property
    def fireworks(self) -> tuple[Firework, ...]:
        return self._show.fireworks

    @property
    def warning_times(self) -> tuple[int, ...]:
        return self._show.warning_times

    @property
    def vendor_bills(self) -> dict[str, float]:
        """Undiscounted bill per vendor, in first-seen order."""
        with self._lock:
            return dict(self._vendor_bills)

    def add_firework(
        self,
        time: int,
        duration: int = DEFAULT_DURATION,
        cost: float = DEFAULT_COST,
        vendor: str = UNKNOWN_VENDOR,
    ) -> bool:
        """Schedule a firework made by `vendor`. Returns False if rejected."""
        with self._lock:
            error = validate_launch_parameters(duration, cost)
            if error:
                logger.debug(
                    "Rejected launch for %s show: %s", self.name, error["message"],
                    extra={
                        "show_name": self.name,
                        "vendor": vendor,
                        "launch_time": time,
                        "error_code": error["error_code"],
                    },
                )
                return False

            if not self._show.add_firework(time, duration, cost):
                return False

            self._vendor_bills[vendor] = self._vendor_bills.get(vendor, 0.0) + cost
            return True

    def update(self, time: int) -> None:
        self._show.update(time)

    def get_fireworks_up(self) -> int:
        return self._show.get_fireworks_up()

    def get_fireworks_up_at(self, time: int) -> int:
        return self._show.get_fireworks_up_at(time)

    def has_warning(self) -> bool:
        return self._show.has_warning()

    def has_warning_at(self, time: int) -> bool:
        return self._show.has_warning_at(time)

    def get_total_warnings(self) -> int:
        return self._show.get_total_warnings()

    def get_cost(self) -> float:
        """Total bill with the volume discount applied per vendor."""
        with self._lock:
            return sum((discounted_bill(total) for total in self._vendor_bills.values()), 0.0)

    def __str__(self) -> str:
        with self._lock:
            return format_company_show_status(str(self._show), self._vendor_bills)

    def __repr__(self) -> str:
        return f"CompanyShow(name={self.name!r}, max_fireworks={self.max_fireworks})"
