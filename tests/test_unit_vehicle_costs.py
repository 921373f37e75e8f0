"""
Unit tests for the vehicle hierarchy: cost formulas per kind, construction
validation, immutability, and the describe() line.
"""

import dataclasses

import pytest

from app.exceptions import ConstructionError
from app.models.vehicle import Car, Utility, Vehicle


def test_vehicle_is_abstract():
    with pytest.raises(TypeError):
        Vehicle("XX-000-XX", 10.0)


def test_car_scenario_three_days_at_18_percent():
    Vehicle.set_tax(0.18)
    car = Car("AB-123-CD", 50.0, 5)
    assert car.rental_cost(3) == pytest.approx(150.0)
    assert car.total_cost(3) == pytest.approx(177.0)


def test_utility_scenario_three_days_at_18_percent():
    Vehicle.set_tax(0.18)
    u = Utility("IJ-789-KL", 80.0, 15.5)
    assert u.utility_supplement() == pytest.approx(77.5)
    assert u.rental_cost(3) == pytest.approx(472.5)
    assert u.total_cost(3) == pytest.approx(557.55)


@pytest.mark.parametrize("price, days, tax", [
    (0.0, 4, 0.2),
    (50.0, 0, 0.2),
    (65.0, 7, 0.0),
    (33.3, 10, 0.5),
])
def test_car_total_is_price_times_days_plus_tax(price, days, tax):
    Vehicle.set_tax(tax)
    car = Car("C", price, 4)
    assert car.total_cost(days) == pytest.approx(price * days * (1 + tax))


@pytest.mark.parametrize("price, volume, days", [
    (95.0, 22.0, 3),
    (80.0, 0.0, 2),
    (0.0, 10.0, 1),
])
def test_utility_total_includes_pretax_volume_surcharge(price, volume, days):
    u = Utility("U", price, volume)
    expected = (price + volume * 5.0) * days * (1 + Vehicle.get_tax())
    assert u.total_cost(days) == pytest.approx(expected)


def test_seats_do_not_change_car_price():
    assert Car("A", 50.0, 2).total_cost(3) == pytest.approx(Car("B", 50.0, 9).total_cost(3))


def test_explicit_tax_rate_overrides_shared_rate_for_one_call():
    car = Car("AB-123-CD", 50.0, 5)
    assert car.total_cost(3, tax_rate=0.0) == pytest.approx(150.0)
    assert car.total_cost(3) == pytest.approx(180.0)  # shared default 20%


def test_default_tax_is_twenty_percent():
    assert Vehicle.get_tax() == pytest.approx(0.20)


def test_defaults_match_empty_construction():
    car = Car()
    assert car.license_plate == ""
    assert car.daily_price == 0.0
    assert car.seat_count == 5
    assert Utility().volume_cubic_meters == 0.0


@pytest.mark.parametrize("build", [
    lambda: Car("A", -1.0, 5),
    lambda: Car("A", 10.0, 0),
    lambda: Car("A", 10.0, -3),
    lambda: Car("A", 10.0, 2.5),
    lambda: Car("A", "fifty", 5),
    lambda: Utility("U", 10.0, -0.5),
    lambda: Utility("U", -10.0, 1.0),
    lambda: Car(123, 10.0, 5),
])
def test_out_of_domain_construction_is_rejected(build):
    with pytest.raises(ConstructionError):
        build()


def test_negative_days_rejected():
    with pytest.raises(ValueError):
        Car("A", 10.0, 5).rental_cost(-1)
    with pytest.raises(ValueError):
        Utility("U", 10.0, 1.0).total_cost(-2)


def test_identity_plate_and_price_are_immutable():
    car = Car("AB-123-CD", 50.0, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        car.license_plate = "ZZ-999-ZZ"
    with pytest.raises(dataclasses.FrozenInstanceError):
        car.daily_price = 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        car.id = 0


def test_describe_includes_kind_identity_plate_price_and_kind_field():
    car = Car("AB-123-CD", 50.0, 5)
    text = car.describe()
    assert text.startswith("Car[")
    assert f"ID: {car.id}" in text
    assert "AB-123-CD" in text
    assert "50.00" in text
    assert "Seats: 5" in text
    assert str(car) == text

    u = Utility("IJ-789-KL", 80.0, 15.5)
    assert u.describe() == f"Utility[ID: {u.id}, License: IJ-789-KL, Price/day: 80.00, Volume: 15.50 m3]"


def test_as_dict_carries_kind_specific_fields():
    assert Car("A", 1.0, 4).as_dict()["seat_count"] == 4
    d = Utility("U", 1.0, 2.0).as_dict()
    assert d["kind"] == "utility"
    assert d["volume_cubic_meters"] == 2.0
