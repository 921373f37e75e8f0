import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from numbers import Integral, Real
from typing import Optional

from .tax import resolve_rate, shared_tax
from ..exceptions import ConstructionError
from ..utils.constants import DEFAULT_SEAT_COUNT, UTILITY_RATE_PER_M3, VehicleKind
from ..utils.filters import fmt_money

# Process-wide id source; every constructed (or duplicated) vehicle draws from it.
_ids = itertools.count(1)


def _non_negative(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ConstructionError(f"Error: {name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConstructionError(f"Error: {name} must be finite, got {value!r}")
    if value < 0:
        raise ConstructionError(f"Error: {name} cannot be negative ({value})")
    return float(value)


def _check_days(num_days) -> int:
    if isinstance(num_days, bool) or not isinstance(num_days, Integral):
        raise ValueError(f"num_days must be an integer, got {num_days!r}")
    if num_days < 0:
        raise ValueError(f"num_days cannot be negative ({num_days})")
    return int(num_days)


@dataclass(frozen=True)
class Vehicle(ABC):
    """
    Base rentable vehicle. Identity, plate and daily price are fixed at construction.

    `rental_cost` is the pre-tax price; kinds may override it to add a per-day
    supplement. `total_cost` is left to each kind, which normally applies the
    shared tax on top of `rental_cost`.
    """
    id: int = field(init=False, compare=False)
    license_plate: str = ""
    daily_price: float = 0.0

    kind = "vehicle"

    def __post_init__(self):
        if not isinstance(self.license_plate, str):
            raise ConstructionError(f"Error: license plate must be text, got {self.license_plate!r}")
        object.__setattr__(self, "daily_price", _non_negative("daily price", self.daily_price))
        object.__setattr__(self, "id", next(_ids))

    # ---------- Shared tax ----------
    @staticmethod
    def get_tax() -> float:
        return shared_tax.get()

    @staticmethod
    def set_tax(rate: float) -> None:
        shared_tax.set(rate)

    # ---------- Costs ----------
    def rental_cost(self, num_days: int) -> float:
        """Pre-tax price for `num_days` days."""
        return self.daily_price * _check_days(num_days)

    def _taxed(self, num_days: int, tax_rate: Optional[float] = None) -> float:
        rate = resolve_rate(tax_rate)
        cost = self.rental_cost(num_days)
        return cost + cost * rate

    @abstractmethod
    def total_cost(self, num_days: int, tax_rate: Optional[float] = None) -> float:
        """
        Price the customer pays for `num_days` days. `tax_rate` overrides the
        shared rate for this call only.
        """

    # ---------- Duplication ----------
    def duplicate(self) -> "Vehicle":
        """
        Independent copy with the same data and a fresh id.
        Kinds holding mutable parts must override this to copy them too.
        """
        return replace(self)

    # ---------- Presentation ----------
    @abstractmethod
    def describe(self) -> str:
        """Kind-specific one-line summary."""

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": self.kind,
            "license_plate": self.license_plate,
            "daily_price": self.daily_price,
        }

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class Car(Vehicle):
    """
    Cars follow the base rule; seats are descriptive only.
    """
    seat_count: int = DEFAULT_SEAT_COUNT

    kind = VehicleKind.CAR

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.seat_count, bool) or not isinstance(self.seat_count, Integral):
            raise ConstructionError(f"Error: seat count must be an integer, got {self.seat_count!r}")
        if self.seat_count <= 0:
            raise ConstructionError(f"Error: seat count must be positive ({self.seat_count})")

    def total_cost(self, num_days: int, tax_rate: Optional[float] = None) -> float:
        return self._taxed(num_days, tax_rate)

    def _summary(self, name: str) -> str:
        return (f"{name}[ID: {self.id}, License: {self.license_plate}, "
                f"Price/day: {fmt_money(self.daily_price)}, Seats: {self.seat_count}]")

    def describe(self) -> str:
        return self._summary("Car")

    def as_dict(self) -> dict:
        data = super().as_dict()
        data["seat_count"] = self.seat_count
        return data


@dataclass(frozen=True)
class Utility(Vehicle):
    """
    Utilities carry a per-day surcharge proportional to cargo volume,
    added before tax.
    """
    volume_cubic_meters: float = 0.0

    kind = VehicleKind.UTILITY

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "volume_cubic_meters",
                           _non_negative("volume", self.volume_cubic_meters))

    def utility_supplement(self) -> float:
        """Per-day surcharge: volume x 5.0."""
        return self.volume_cubic_meters * UTILITY_RATE_PER_M3

    def rental_cost(self, num_days: int) -> float:
        days = _check_days(num_days)
        return self.daily_price * days + self.utility_supplement() * days

    def total_cost(self, num_days: int, tax_rate: Optional[float] = None) -> float:
        return self._taxed(num_days, tax_rate)

    def describe(self) -> str:
        return (f"Utility[ID: {self.id}, License: {self.license_plate}, "
                f"Price/day: {fmt_money(self.daily_price)}, "
                f"Volume: {fmt_money(self.volume_cubic_meters)} m3]")

    def as_dict(self) -> dict:
        data = super().as_dict()
        data["volume_cubic_meters"] = self.volume_cubic_meters
        return data
