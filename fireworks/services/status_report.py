"""Status Report — validated snapshots of shows and towns.

Invariants:
    - Reports are built from core.show_stats, never from private aggregate state
    - Every report passes schema validation before it is returned
"""

import logging

from fireworks.core.show_protocols import ShowLike
from fireworks.core.show_stats import compute_show_stats, compute_town_stats
from fireworks.core.town import Town
from fireworks.schemas.status import ShowStatus, TownStatus

logger = logging.getLogger(__name__)


def build_show_report(show: ShowLike) -> ShowStatus:
    return ShowStatus.model_validate(compute_show_stats(show))


def build_town_report(town: Town) -> TownStatus:
    """Snapshot the town and its shows as a TownStatus."""
    report = TownStatus.model_validate(compute_town_stats(town))
    logger.debug(
        "Town report at t=%d: %d show(s), %d firework(s) up, cost %.2f",
        report.current_time, len(report.shows), report.fireworks_up, report.total_cost,
    )
    return report
