"""Demo entry point — runs a short sample schedule and prints the town status.

Invariants:
    - Takes no arguments; behavior is controlled by FIREWORKS_* settings only
    - Logging configured once, from settings, before any show is built
"""

import logging

from fireworks.config import get_settings
from fireworks.core.company_show import CompanyShow
from fireworks.core.show import Show
from fireworks.core.town import Town
from fireworks.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

# (show_index, time, duration, cost, vendor)
SAMPLE_SCHEDULE: tuple[tuple[int, int, int, float, str | None], ...] = (
    (0, 0, 3, 20.0, None),
    (0, 1, 2, 35.0, None),
    (1, 1, 4, 60.0, "Skyburst"),
    (1, 2, 2, 50.0, "Skyburst"),
    (1, 2, 1, 15.0, "Nova"),
    (0, 2, 1, 20.0, None),
)


def build_sample_town() -> Town:
    """A town with one plain and one company show, sample schedule applied."""
    town = Town()
    town.add(Show(3, "harbor"))
    town.add(CompanyShow(4, "riverside"))
    for show_index, time, duration, cost, vendor in SAMPLE_SCHEDULE:
        if not town.add_firework(show_index, time, duration, cost, vendor=vendor):
            logger.warning(
                "Sample launch rejected", extra={"show_index": show_index, "launch_time": time},
            )
    return town


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    town = build_sample_town()
    logger.info("Sample town built with %d show(s)", len(town))
    print(town, end="")
    print(f"Fireworks up: {town.get_fireworks_up()}")
    print(f"Town warnings: {town.get_total_warnings()}")
    print(f"Total cost: ${town.get_total_cost():.2f}")


if __name__ == "__main__":
    main()
