"""Show Stats — pure computation of status snapshots from shows and towns.

Invariants:
    - Reads only the public ShowLike surface (no private state)
    - Returns flat JSON-safe dicts (no Enums, no tuples)
    - Querying stats never advances a clock; it may memoize the current
      tick's warning, exactly as has_warning() does

Design Decisions:
    - Pure functions, not methods on the aggregates: aggregates enforce rules,
      stats are presentation
    - Vendor bills are reported undiscounted, matching the status lines
"""

from typing import cast

from fireworks.core.domain_types import ShowKind
from fireworks.core.format_status import capacity_percent
from fireworks.core.show_protocols import ShowLike, VendorTaggedShowLike
from fireworks.core.town import Town


def compute_show_stats(show: ShowLike) -> dict:
    """Snapshot one show at its own current time."""
    fireworks_up = show.get_fireworks_up()
    stats = {
        "name": show.name,
        "kind": show.kind.value,
        "current_time": show.current_time,
        "max_fireworks": show.max_fireworks,
        "fireworks_up": fireworks_up,
        "capacity_percent": round(capacity_percent(fireworks_up, show.max_fireworks), 1),
        "has_warning": show.has_warning(),
        "total_warnings": show.get_total_warnings(),
        "total_fireworks": len(show.fireworks),
        "cost": show.get_cost(),
        "vendor_bills": [],
    }
    if show.kind == ShowKind.VENDOR_TAGGED:
        tagged = cast(VendorTaggedShowLike, show)
        stats["vendor_bills"] = [
            {"vendor": vendor, "total": total}
            for vendor, total in tagged.vendor_bills.items()
        ]
    return stats


def compute_town_stats(town: Town) -> dict:
    """Snapshot a town and every show in it."""
    return {
        "current_time": town.current_time,
        "fireworks_up": town.get_fireworks_up(),
        "has_warning": town.has_warning(),
        "total_warnings": town.get_total_warnings(),
        "total_cost": town.get_total_cost(),
        "shows": [compute_show_stats(show) for show in town.shows],
    }
