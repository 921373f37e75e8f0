from __future__ import annotations

from numbers import Integral
from typing import Iterator, Optional

from .tax import resolve_rate
from .vehicle import Vehicle
from ..exceptions import ConstructionError, MergeCapacityError
from ..utils.constants import InsertRejection, MERGE_SEPARATOR


class Agency:
    """
    A named rental agency owning at most `capacity` vehicles.

    Every vehicle in the fleet is a private duplicate: inserting never keeps
    a reference to the caller's object, and copying an agency duplicates
    each member again. Totals go through `Vehicle.total_cost` only; the
    agency never looks at a member's concrete kind.
    """

    def __init__(self, name: str, capacity: int):
        if not isinstance(name, str):
            raise ConstructionError(f"Error: agency name must be text, got {name!r}")
        if isinstance(capacity, bool) or not isinstance(capacity, Integral) or capacity <= 0:
            raise ConstructionError(f"Error: agency capacity must be a positive integer, got {capacity!r}")
        self.name = name
        self.capacity = int(capacity)
        self._fleet: list[Vehicle] = []

    # ---------- Fleet ----------
    @property
    def fleet(self) -> tuple[Vehicle, ...]:
        return tuple(self._fleet)

    @property
    def vehicle_count(self) -> int:
        return len(self._fleet)

    def __len__(self) -> int:
        return len(self._fleet)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(tuple(self._fleet))

    def rejection_reason(self, vehicle) -> Optional[str]:
        """Why `insert(vehicle)` would fail, or None if it would succeed."""
        if not isinstance(vehicle, Vehicle):
            return InsertRejection.INVALID_REFERENCE
        if len(self._fleet) >= self.capacity:
            return InsertRejection.CAPACITY_EXCEEDED
        return None

    def insert(self, vehicle) -> bool:
        """
        Add a private duplicate of `vehicle`. Returns False, leaving the fleet
        untouched, when the fleet is full or `vehicle` is not a Vehicle.
        """
        if self.rejection_reason(vehicle) is not None:
            return False
        self._fleet.append(vehicle.duplicate())
        return True

    # ---------- Merge / copy ----------
    def merge(self, other: "Agency") -> "Agency":
        """
        New agency holding both fleets (self first, then other) with the
        summed capacity. Every vehicle must fit; a drop raises MergeCapacityError.
        """
        merged = Agency(f"{self.name}{MERGE_SEPARATOR}{other.name}", self.capacity + other.capacity)
        for v in (*self._fleet, *other._fleet):
            if not merged.insert(v):
                raise MergeCapacityError(
                    f"Error: merging '{self.name}' and '{other.name}' dropped vehicle {v.id}")
        return merged

    def __add__(self, other: "Agency") -> "Agency":
        if not isinstance(other, Agency):
            return NotImplemented
        return self.merge(other)

    def copy(self) -> "Agency":
        clone = Agency(self.name, self.capacity)
        clone._fleet = [v.duplicate() for v in self._fleet]
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Agency":
        return self.copy()

    def assign(self, other: "Agency") -> "Agency":
        """Replace this agency's state with a deep copy of `other`'s."""
        if other is self:
            return self
        self._fleet.clear()
        self.name = other.name
        self.capacity = other.capacity
        self._fleet = [v.duplicate() for v in other._fleet]
        return self

    # ---------- Totals ----------
    def total_to_pay(self, num_days: int, tax_rate: Optional[float] = None) -> float:
        rate = resolve_rate(tax_rate)
        return sum((v.total_cost(num_days, rate) for v in self._fleet), 0.0)

    # ---------- Presentation ----------
    def describe(self) -> str:
        lines = [
            f"Agency: {self.name}",
            f"Capacity: {self.capacity}",
            f"Vehicles ({len(self._fleet)}):",
        ]
        lines.extend(f"  {v.describe()}" for v in self._fleet)
        return "\n".join(lines) + "\n"

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "capacity": self.capacity,
            "vehicle_count": len(self._fleet),
            "fleet": [v.as_dict() for v in self._fleet],
        }

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Agency(name={self.name!r}, capacity={self.capacity}, vehicles={len(self._fleet)})"


def total_to_pay(agency: Agency, num_days: int) -> float:
    """Sum of every fleet member's total cost for `num_days`."""
    return agency.total_to_pay(num_days)
