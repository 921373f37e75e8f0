"""
Unit tests for Agency: capacity-checked insertion by duplication, merge,
deep copy / assignment, and polymorphic totals over a mixed fleet.
"""

import copy

import pytest

from app.exceptions import ConstructionError, MergeCapacityError
from app.models.agency import Agency, total_to_pay
from app.models.optioned_car import OptionedCar
from app.models.vehicle import Car, Utility, Vehicle
from app.utils.constants import InsertRejection


def make_mixed_agency(name="Agency_Center", capacity=5):
    agency = Agency(name, capacity)
    agency.insert(Car("AB-123-CD", 50.0, 5))
    agency.insert(Utility("IJ-789-KL", 80.0, 15.5))
    agency.insert(OptionedCar.build("GG-444-HH", 70.0, 5, True, True, 12.0, 7.0))
    return agency


def plates(agency):
    return [v.license_plate for v in agency.fleet]


def test_capacity_scenario_sixth_insert_fails():
    agency = make_mixed_agency(capacity=5)
    assert len(agency) == 3
    assert agency.insert(Car("EF-456-GH", 65.0, 7))
    assert agency.insert(Utility("MN-012-OP", 95.0, 22.0))
    assert agency.rejection_reason(Car("QR-345-ST", 55.0, 4)) == InsertRejection.CAPACITY_EXCEEDED
    assert agency.insert(Car("QR-345-ST", 55.0, 4)) is False
    assert agency.vehicle_count == 5
    assert "QR-345-ST" not in plates(agency)


def test_insert_stores_a_private_duplicate():
    original = Car("AB-123-CD", 50.0, 5)
    agency = Agency("A", 2)
    assert agency.insert(original)
    stored = agency.fleet[0]
    assert stored is not original
    assert stored == original
    assert stored.id != original.id


def test_insert_duplicate_does_not_alias_capabilities():
    original = OptionedCar.build("GG-444-HH", 70.0, 5, insurance=True)
    agency = Agency("A", 2)
    agency.insert(original)
    original.insurance.deactivate()
    assert agency.fleet[0].insurance.active is True


@pytest.mark.parametrize("bad", [None, "AB-123-CD", 42, Agency("X", 1)])
def test_insert_invalid_reference_returns_false(bad):
    agency = Agency("A", 2)
    assert agency.rejection_reason(bad) == InsertRejection.INVALID_REFERENCE
    assert agency.insert(bad) is False
    assert len(agency) == 0


def test_fleet_view_is_read_only():
    agency = make_mixed_agency()
    assert isinstance(agency.fleet, tuple)
    assert [v.license_plate for v in agency] == plates(agency)


@pytest.mark.parametrize("capacity", [0, -1, 2.5, "5", True])
def test_capacity_must_be_positive_integer(capacity):
    with pytest.raises(ConstructionError):
        Agency("A", capacity)


def test_merge_keeps_order_sums_capacity_and_joins_names():
    center = make_mixed_agency("Agency_Center", 5)
    north = Agency("Agency_North", 3)
    north.insert(Car("QR-345-ST", 55.0, 4))

    merged = center + north

    assert merged.name == "Agency_Center_Agency_North"
    assert merged.capacity == 8
    assert len(merged) == len(center) + len(north)
    assert plates(merged) == plates(center) + plates(north)
    # members are fresh duplicates, sources untouched
    assert {v.id for v in merged.fleet}.isdisjoint({v.id for v in center.fleet})
    assert len(center) == 3 and len(north) == 1


def test_merge_method_matches_operator():
    a, b = make_mixed_agency("A", 3), make_mixed_agency("B", 4)
    assert plates(a.merge(b)) == plates(a + b)


def test_merge_raises_when_a_vehicle_would_be_dropped():
    a = Agency("A", 1)
    # bypass insert() to break the capacity invariant
    a._fleet.extend([Car("1", 1.0, 2), Car("2", 1.0, 2), Car("3", 1.0, 2)])
    b = Agency("B", 1)
    with pytest.raises(MergeCapacityError):
        a.merge(b)


def test_adding_non_agency_is_type_error():
    with pytest.raises(TypeError):
        Agency("A", 1) + 5


def test_total_to_pay_sums_polymorphic_total_costs():
    Vehicle.set_tax(0.18)
    agency = make_mixed_agency()
    expected = sum(v.total_cost(7) for v in agency.fleet)
    assert agency.total_to_pay(7) == pytest.approx(expected)
    assert total_to_pay(agency, 7) == pytest.approx(expected)
    # 50*7*1.18 + (80+77.5)*7*1.18 + (70*7*1.18 + 12*7 + 7*7)
    assert expected == pytest.approx(413.0 + 1300.95 + 711.2)


def test_total_to_pay_of_empty_agency_is_zero():
    assert Agency("Empty", 3).total_to_pay(10) == 0.0


def test_copy_is_deep_and_order_preserving():
    agency = make_mixed_agency()
    clone = agency.copy()

    assert clone is not agency
    assert (clone.name, clone.capacity) == (agency.name, agency.capacity)
    assert plates(clone) == plates(agency)
    for a, b in zip(agency.fleet, clone.fleet):
        assert a is not b
        assert a == b
        assert a.id != b.id

    clone.fleet[2].gps.deactivate()
    assert agency.fleet[2].gps.active is True

    clone.insert(Car("NEW", 1.0, 2))
    assert len(agency) == 3


def test_copy_module_uses_deep_duplication():
    agency = make_mixed_agency()
    for clone in (copy.copy(agency), copy.deepcopy(agency)):
        assert plates(clone) == plates(agency)
        assert clone.fleet[0] is not agency.fleet[0]


def test_assign_replaces_receiver_state_with_duplicates():
    source = make_mixed_agency("Source", 5)
    target = Agency("Target", 2)
    target.insert(Car("OLD", 1.0, 2))

    target.assign(source)

    assert (target.name, target.capacity) == ("Source", 5)
    assert plates(target) == plates(source)
    assert "OLD" not in plates(target)
    assert target.fleet[0] is not source.fleet[0]


def test_self_assign_keeps_fleet():
    agency = make_mixed_agency()
    ids = [v.id for v in agency.fleet]
    agency.assign(agency)
    assert [v.id for v in agency.fleet] == ids


def test_describe_lists_header_and_each_vehicle():
    agency = make_mixed_agency()
    lines = agency.describe().splitlines()
    assert lines[0] == "Agency: Agency_Center"
    assert lines[1] == "Capacity: 5"
    assert lines[2] == "Vehicles (3):"
    assert lines[3] == "  " + agency.fleet[0].describe()
    assert len(lines) == 6


def test_total_to_pay_rejects_bad_explicit_rate_even_when_empty():
    agency = Agency("Empty", 2)
    with pytest.raises(ConstructionError):
        agency.total_to_pay(3, tax_rate=-1.0)
    agency.insert(Car("AB-123-CD", 50.0, 5))
    with pytest.raises(ConstructionError):
        agency.total_to_pay(3, tax_rate=float("nan"))
