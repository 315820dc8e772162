"""CompanyShow tests — the vendor-tagged show variant.

Tests cover:
    - Vendor attribution (named and UNKNOWN)
    - Volume discount per accumulated vendor bill
    - Rejected launches never touch vendor bills
    - Status lines show undiscounted bills
"""

import pytest

from fireworks.core.company_show import CompanyShow, discounted_bill
from fireworks.core.domain_types import ShowKind


def test_default_name_is_company():
    show = CompanyShow(3)
    assert show.name == "company"
    assert show.kind == ShowKind.VENDOR_TAGGED


def test_vendorless_launch_billed_to_unknown():
    show = CompanyShow(3)
    assert show.add_firework(0, 1, 12.0)
    assert show.vendor_bills == {"UNKNOWN": 12.0}


def test_bills_accumulate_per_vendor():
    show = CompanyShow(5)
    show.add_firework(0, 1, 60.0, vendor="A")
    show.add_firework(0, 1, 50.0, vendor="A")
    show.add_firework(1, 1, 5.0, vendor="B")
    assert show.vendor_bills == {"A": 110.0, "B": 5.0}
    assert sum(show.vendor_bills.values()) == sum(f.cost for f in show.fireworks)


# ─── Billing ─────────────────────────────────────────────────────

def test_discount_applied_to_accumulated_vendor_bill():
    show = CompanyShow(5)
    show.add_firework(0, 1, 60.0, vendor="A")
    show.add_firework(0, 1, 50.0, vendor="A")
    assert show.get_cost() == pytest.approx(104.5)


def test_small_bills_billed_at_face_value():
    show = CompanyShow(5)
    show.add_firework(0, 1, 60.0, vendor="A")
    show.add_firework(0, 1, 50.0, vendor="A")
    show.add_firework(0, 1, 40.0, vendor="B")
    assert show.get_cost() == pytest.approx(144.5)


def test_discount_starts_at_exactly_one_hundred():
    assert discounted_bill(100.0) == pytest.approx(95.0)
    assert discounted_bill(99.99) == pytest.approx(99.99)


# ─── Rejections ──────────────────────────────────────────────────

@pytest.mark.parametrize("duration, cost", [(0, 20.0), (1, -1.0)])
def test_invalid_parameters_not_billed(duration, cost):
    show = CompanyShow(5)
    assert not show.add_firework(0, duration, cost, vendor="A")
    assert show.vendor_bills == {}
    assert show.fireworks == ()


def test_rejected_by_capacity_not_billed():
    show = CompanyShow(1)
    assert show.add_firework(0, 2, 30.0, vendor="A")
    assert not show.add_firework(1, 1, 30.0, vendor="A")
    assert show.vendor_bills == {"A": 30.0}


def test_past_launch_not_billed():
    show = CompanyShow(3)
    show.add_firework(5, vendor="A")
    assert not show.add_firework(2, vendor="B")
    assert "B" not in show.vendor_bills


# ─── Shared show behavior ────────────────────────────────────────

def test_clock_and_warnings_follow_show_rules():
    show = CompanyShow(1)
    show.add_firework(0, 2, vendor="A")
    show.update(4)
    assert show.current_time == 4
    assert show.warning_times == (0, 1, 2)
    assert show.get_total_warnings() == 1
    assert not show.has_warning()


# ─── Status ──────────────────────────────────────────────────────

def test_status_shows_undiscounted_vendor_totals():
    show = CompanyShow(4)
    show.add_firework(0, 1, 60.0, vendor="A")
    show.add_firework(0, 1, 50.0, vendor="A")
    assert str(show) == "Status for company show: 2 fireworks up (50.0%)\n--A $110.00"


def test_status_lists_vendors_in_first_seen_order():
    show = CompanyShow(10, "riverside")
    show.add_firework(0, 1, 7.25, vendor="Nova")
    show.add_firework(0, 1, 3.0)
    assert str(show).splitlines()[1:] == ["--Nova $7.25", "--UNKNOWN $3.00"]
