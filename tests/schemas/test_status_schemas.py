"""Status Schemas — validation of show and town snapshots."""

import pytest
from pydantic import ValidationError

from fireworks.core.domain_types import ShowKind
from fireworks.schemas.status import ShowStatus, TownStatus, VendorBill


def _show_payload(**overrides) -> dict:
    payload = {
        "name": "harbor",
        "kind": "plain",
        "current_time": 3,
        "max_fireworks": 4,
        "fireworks_up": 1,
        "capacity_percent": 25.0,
        "has_warning": False,
        "total_warnings": 0,
        "total_fireworks": 2,
        "cost": 40.0,
    }
    payload.update(overrides)
    return payload


def test_show_status_coerces_kind_to_enum():
    status = ShowStatus.model_validate(_show_payload(kind="vendor_tagged"))
    assert status.kind == ShowKind.VENDOR_TAGGED
    assert status.vendor_bills == []


def test_show_status_rejects_negative_counts():
    with pytest.raises(ValidationError):
        ShowStatus.model_validate(_show_payload(fireworks_up=-1))


def test_show_status_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        ShowStatus.model_validate(_show_payload(kind="fountain"))


def test_vendor_bill_requires_vendor_name():
    with pytest.raises(ValidationError):
        VendorBill(vendor="", total=1.0)


def test_vendor_bill_rejects_negative_total():
    with pytest.raises(ValidationError):
        VendorBill(vendor="A", total=-5.0)


def test_town_status_nests_shows():
    town = TownStatus.model_validate({
        "current_time": 3,
        "fireworks_up": 1,
        "has_warning": False,
        "total_warnings": 0,
        "total_cost": 40.0,
        "shows": [_show_payload()],
    })
    assert town.shows[0].name == "harbor"
