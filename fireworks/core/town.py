"""Town — several shows on one clock, with a town-wide warning record.

Invariants:
    - Show indices are stable: shows are append-only, never removed or reused
    - The town warns at t only if EVERY show warns at t (logical AND)
    - update(t) advances every show to t before probing town warnings
    - Town warnings and cursor are independent of each show's own record
    - Launch parameters are validated before the target show is looked up

Design Decisions:
    - Vendor-tagged launches dispatch on ShowKind and raise
      VendorTaggingUnsupportedError on a plain show instead of failing on an attribute
    - Unknown indices raise ShowNotFoundError (negative indices included)
    - get_fireworks_up sums each show at its OWN clock, not the town's
"""

import logging
import threading
from typing import cast

from fireworks.core.domain_types import DEFAULT_COST, DEFAULT_DURATION, ShowKind
from fireworks.core.enforce_launch import validate_launch_parameters
from fireworks.core.errors import (
    ErrorContext,
    ShowNotFoundError,
    VendorTaggingUnsupportedError,
)
from fireworks.core.format_status import format_town_status
from fireworks.core.show_protocols import ShowLike, VendorTaggedShowLike
from fireworks.core.warning_timeline import WarningTimeline

logger = logging.getLogger(__name__)


class Town:
    """A collection of shows tracked against a shared town clock."""

    def __init__(self) -> None:
        self._shows: list[ShowLike] = []
        self._timeline = WarningTimeline()
        self._lock = threading.RLock()

    @property
    def shows(self) -> tuple[ShowLike, ...]:
        with self._lock:
            return tuple(self._shows)

    @property
    def current_time(self) -> int:
        return self._timeline.current_time

    @property
    def warning_times(self) -> tuple[int, ...]:
        with self._lock:
            return self._timeline.warning_times

    def __len__(self) -> int:
        return len(self._shows)

    def add(self, show: ShowLike) -> int:
        """Add a show and return its index."""
        with self._lock:
            self._shows.append(show)
            index = len(self._shows) - 1
        logger.info(
            "Added %s show at index %d", show.name, index,
            extra={"show_name": show.name, "show_index": index},
        )
        return index

    def get_show(self, show_index: int) -> ShowLike:
        """Return the show at `show_index`.

        Raises:
            ShowNotFoundError: If no show has that index.
        """
        return self._lookup(show_index)

    def _lookup(self, show_index: int, context: ErrorContext | None = None) -> ShowLike:
        with self._lock:
            if not 0 <= show_index < len(self._shows):
                raise ShowNotFoundError(show_index, len(self._shows), context)
            return self._shows[show_index]

    def add_firework(
        self,
        show_index: int,
        time: int,
        duration: int = DEFAULT_DURATION,
        cost: float = DEFAULT_COST,
        vendor: str | None = None,
    ) -> bool:
        """Schedule a firework on one show and advance the town clock.

        Returns False if the launch was rejected.

        Raises:
            ShowNotFoundError: If no show has that index.
            VendorTaggingUnsupportedError: If `vendor` is given for a plain show.
        """
        with self._lock:
            error = validate_launch_parameters(duration, cost)
            if error:
                logger.debug(
                    "Rejected town launch: %s", error["message"],
                    extra={
                        "show_index": show_index,
                        "launch_time": time,
                        "error_code": error["error_code"],
                    },
                )
                return False

            show = self._lookup(show_index, ErrorContext(launch_time=time))
            if vendor is None:
                added = show.add_firework(time, duration, cost)
            elif show.kind == ShowKind.VENDOR_TAGGED:
                tagged = cast(VendorTaggedShowLike, show)
                added = tagged.add_firework(time, duration, cost, vendor=vendor)
            else:
                raise VendorTaggingUnsupportedError(
                    show_index, show.name, vendor, ErrorContext(launch_time=time),
                )

            if added:
                self.update(time)
            return added

    def update(self, time: int) -> None:
        """Advance every show and the town clock to `time`. Earlier times are ignored."""
        with self._lock:
            if time < self._timeline.current_time:
                return

            for show in self._shows:
                show.update(time)

            self._timeline.advance(time, self.has_warning_at)

    def has_warning(self) -> bool:
        return self.has_warning_at(self.current_time)

    def has_warning_at(self, time: int) -> bool:
        """Whether every show warns at `time`. Memoizes hits."""
        with self._lock:
            if self._timeline.is_memoized(time):
                return True

            for show in self._shows:
                if not show.has_warning_at(time):
                    return False

            self._timeline.record(time)
            return True

    def get_total_warnings(self) -> int:
        with self._lock:
            return self._timeline.total_warnings()

    def get_fireworks_up(self) -> int:
        with self._lock:
            return sum(show.get_fireworks_up() for show in self._shows)

    def get_total_cost(self) -> float:
        with self._lock:
            return sum((show.get_cost() for show in self._shows), 0.0)

    def __str__(self) -> str:
        with self._lock:
            return format_town_status(str(show) for show in self._shows)
