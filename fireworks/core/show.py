"""Show — a single fireworks show with a capacity limit and warning tracking.

Invariants:
    - A firework is accepted only if duration >= 1, cost >= 0, its launch time
      is not before current_time, and fewer than max_fireworks are up at launch
    - A rejected launch leaves fireworks, warnings, and current_time untouched
    - Accepting a launch at t advances the show to t, memoizing warnings for
      every tick passed
    - A tick is a warning when fireworks up / max_fireworks * 100 >= WARNING_THRESHOLD
    - A capacity of zero or below accepts no launch and never warns

Design Decisions:
    - One add_firework with keyword defaults instead of overload chains
    - RLock per show: capacity check + insert + cursor advance are one step
"""

import logging
import threading

from fireworks.core.domain_types import (
    DEFAULT_COST,
    DEFAULT_DURATION,
    DEFAULT_SHOW_NAME,
    ShowKind,
)
from fireworks.core.enforce_launch import validate_launch
from fireworks.core.firework import Firework
from fireworks.core.format_status import (
    capacity_percent,
    format_show_status,
    is_warning_level,
)
from fireworks.core.warning_timeline import WarningTimeline

logger = logging.getLogger(__name__)


class Show:
    """Plain show: fireworks, a forward-only clock, and memoized warnings."""

    kind = ShowKind.PLAIN

    def __init__(self, max_fireworks: int, name: str = DEFAULT_SHOW_NAME) -> None:
        self._name = name
        self._max_fireworks = max_fireworks
        self._fireworks: list[Firework] = []
        self._timeline = WarningTimeline()
        self._lock = threading.RLock()

    # --- Accessors ---------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_fireworks(self) -> int:
        return self._max_fireworks

    @property
    def current_time(self) -> int:
        return self._timeline.current_time

    @property
    def fireworks(self) -> tuple[Firework, ...]:
        with self._lock:
            return tuple(self._fireworks)

    @property
    def warning_times(self) -> tuple[int, ...]:
        with self._lock:
            return self._timeline.warning_times

    # --- Mutation ----------------------------------------------------------------

    def add_firework(
        self, time: int, duration: int = DEFAULT_DURATION, cost: float = DEFAULT_COST,
    ) -> bool:
        """Schedule a firework. Returns False if it was rejected."""
        with self._lock:
            error = validate_launch(
                time, duration, cost,
                current_time=self.current_time,
                fireworks_up=self.get_fireworks_up_at(time),
                max_fireworks=self._max_fireworks,
            )
            if error:
                logger.debug(
                    "Rejected launch for %s show: %s", self._name, error["message"],
                    extra={
                        "show_name": self._name,
                        "launch_time": time,
                        "error_code": error["error_code"],
                    },
                )
                return False

            self._fireworks.append(Firework(time, duration, cost))
            self.update(time)
            return True

    def update(self, time: int) -> None:
        """Advance the show clock to `time`. Earlier times are ignored."""
        with self._lock:
            self._timeline.advance(time, self.has_warning_at)

    # --- Queries -----------------------------------------------------------------

    def get_fireworks_up(self) -> int:
        return self.get_fireworks_up_at(self.current_time)

    def get_fireworks_up_at(self, time: int) -> int:
        with self._lock:
            return sum(1 for firework in self._fireworks if firework.is_up_at(time))

    def has_warning(self) -> bool:
        return self.has_warning_at(self.current_time)

    def has_warning_at(self, time: int) -> bool:
        """Whether the show is at warning level at `time`. Memoizes hits."""
        with self._lock:
            if self._timeline.is_memoized(time):
                return True

            percent = capacity_percent(self.get_fireworks_up_at(time), self._max_fireworks)
            if is_warning_level(percent):
                self._timeline.record(time)
                return True

            return False

    def get_total_warnings(self) -> int:
        """Number of separate warning periods (runs of consecutive ticks)."""
        with self._lock:
            return self._timeline.total_warnings()

    def get_cost(self) -> float:
        with self._lock:
            return sum((firework.cost for firework in self._fireworks), 0.0)

    def __str__(self) -> str:
        with self._lock:
            return format_show_status(self._name, self.get_fireworks_up(), self._max_fireworks)

    def __repr__(self) -> str:
        return f"Show(name={self._name!r}, max_fireworks={self._max_fireworks})"
