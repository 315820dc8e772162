"""Warning Timeline — memoized warning ticks plus a forward-only cursor.

Invariants:
    - current_time never decreases; advance() to an earlier time is a no-op
    - Warning ticks are de-duplicated and only ever added, never removed
    - advance() probes every tick from the old cursor through the new one inclusive

Design Decisions:
    - Shared by Show and Town: both own an independent timeline, only the
      warning predicate differs, so it is passed in as a callable
    - Run counting is a pure function so it can be tested without a show
"""

from collections.abc import Callable, Iterable


def count_warning_runs(warning_times: Iterable[int]) -> int:
    """Number of maximal runs of consecutive integers in warning_times.

    {5, 6, 7, 10} -> 2. Empty -> 0.
    """
    ordered = sorted(set(warning_times))
    if len(ordered) <= 1:
        return len(ordered)

    runs = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous > 1:
            runs += 1
    return runs


class WarningTimeline:
    """Cursor and warning memo for one aggregate."""

    def __init__(self, start_time: int = 0) -> None:
        self._current_time = start_time
        self._warning_times: set[int] = set()

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def warning_times(self) -> tuple[int, ...]:
        return tuple(sorted(self._warning_times))

    def is_memoized(self, time: int) -> bool:
        return time in self._warning_times

    def record(self, time: int) -> None:
        self._warning_times.add(time)

    def advance(self, time: int, probe: Callable[[int], bool]) -> bool:
        """Probe each tick up to `time`, then move the cursor.

        Returns False (and does nothing) when `time` is behind the cursor.
        """
        if time < self._current_time:
            return False

        for tick in range(self._current_time, time + 1):
            probe(tick)

        self._current_time = time
        return True

    def total_warnings(self) -> int:
        return count_warning_runs(self._warning_times)
