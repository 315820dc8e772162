"""Status Formatting — pure functions that render human-readable status lines.

Invariants:
    - All functions are pure (no IO, no state)
    - Percent of capacity is shown with one decimal place, or WARNING once
      it reaches WARNING_THRESHOLD
    - Vendor lines show undiscounted totals with two decimals
    - Town status always ends with a newline after the last show

Design Decisions:
    - Extracted from the aggregates so __str__ stays a one-liner and the
      line formats are testable without building a show
"""

from collections.abc import Iterable, Mapping

from fireworks.core.domain_types import WARNING_THRESHOLD


def capacity_percent(fireworks_up: int, max_fireworks: int) -> float:
    """Share of capacity in use, 0-100 scale. Zero capacity reads as 0.0."""
    if max_fireworks <= 0:
        return 0.0
    return fireworks_up / max_fireworks * 100


def is_warning_level(percent: float, threshold: int = WARNING_THRESHOLD) -> bool:
    return percent >= threshold


def format_show_status(name: str, fireworks_up: int, max_fireworks: int) -> str:
    """`Status for <name> show: <N> fireworks up (<P>%)` or `(WARNING)`."""
    percent = capacity_percent(fireworks_up, max_fireworks)
    # Always one decimal: 25.0%, never 25%
    level = "WARNING" if is_warning_level(percent) else f"{percent:.1f}%"
    return f"Status for {name} show: {fireworks_up} fireworks up ({level})"


def format_vendor_lines(vendor_bills: Mapping[str, float]) -> list[str]:
    """One `--<vendor> $<total>` line per vendor, insertion order."""
    # Always two decimals with a leading zero: $0.50, never $.50
    return [f"--{vendor} ${total:.2f}" for vendor, total in vendor_bills.items()]


def format_company_show_status(show_status: str, vendor_bills: Mapping[str, float]) -> str:
    return "\n".join([show_status, *format_vendor_lines(vendor_bills)])


def format_town_status(show_statuses: Iterable[str]) -> str:
    return "Town status:\n" + "".join(f"{status}\n" for status in show_statuses)
