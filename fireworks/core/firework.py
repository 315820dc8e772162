"""Firework — a single scheduled launch.

Invariants:
    - Immutable after construction (frozen dataclass)
    - Airborne interval is closed on both ends: [launch_time, launch_time + duration]
    - No validation here; the adding show enforces duration/cost rules

Design Decisions:
    - Frozen dataclass over a bare tuple: named fields, hashable, cheap
"""

from dataclasses import dataclass

from fireworks.core.domain_types import DEFAULT_COST, DEFAULT_DURATION


@dataclass(frozen=True)
class Firework:
    """A launch at `launch_time` that stays up for `duration` ticks."""

    launch_time: int
    duration: int = DEFAULT_DURATION
    cost: float = DEFAULT_COST

    @property
    def end_time(self) -> int:
        """Last tick the firework is still in the air."""
        return self.launch_time + self.duration

    def is_up_at(self, time: int) -> bool:
        return self.launch_time <= time <= self.end_time
