"""Warning Timeline — tests for run counting and the forward-only cursor.

Tests cover:
    - count_warning_runs on empty, single, and gapped sets
    - advance() probes every tick inclusive and moves the cursor
    - advance() to an earlier time is a no-op
"""

from fireworks.core.warning_timeline import WarningTimeline, count_warning_runs


# ─── count_warning_runs ──────────────────────────────────────────

def test_no_warnings_counts_zero():
    assert count_warning_runs([]) == 0


def test_single_warning_counts_one():
    assert count_warning_runs([42]) == 1


def test_gapped_set_counts_each_run():
    assert count_warning_runs({5, 6, 7, 10}) == 2


def test_unsorted_input_is_sorted_first():
    assert count_warning_runs([10, 5, 7, 6]) == 2


def test_every_tick_isolated():
    assert count_warning_runs([1, 3, 5, 7]) == 4


# ─── WarningTimeline ─────────────────────────────────────────────

def test_advance_probes_every_tick_inclusive():
    timeline = WarningTimeline()
    probed: list[int] = []
    assert timeline.advance(3, lambda t: probed.append(t) or False)
    assert probed == [0, 1, 2, 3]
    assert timeline.current_time == 3


def test_advance_backwards_is_noop():
    timeline = WarningTimeline()
    timeline.advance(5, lambda t: False)
    probed: list[int] = []
    assert not timeline.advance(2, lambda t: probed.append(t) or False)
    assert probed == []
    assert timeline.current_time == 5


def test_record_is_deduplicated_and_sorted():
    timeline = WarningTimeline()
    for tick in (4, 2, 4, 3):
        timeline.record(tick)
    assert timeline.warning_times == (2, 3, 4)
    assert timeline.is_memoized(3)
    assert not timeline.is_memoized(5)
    assert timeline.total_warnings() == 1
