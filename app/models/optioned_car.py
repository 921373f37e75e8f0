from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .options import Capability, GPSCapability, InsuranceCapability
from .tax import resolve_rate
from .vehicle import Car
from ..exceptions import ConstructionError
from ..utils.constants import DEFAULT_GPS_COST, DEFAULT_INSURANCE_COST, VehicleKind


@dataclass(frozen=True)
class OptionedCar(Car):
    """
    A car with attached add-ons. The car part is priced and taxed like any
    other car; each active add-on is then charged on top, untaxed.

    The add-ons are held, not inherited: the car's own fields stay frozen
    while each capability keeps its own mutable on/off state and cost.
    """
    # Capabilities are mutable: compared for equality, left out of the hash.
    insurance: InsuranceCapability = field(default_factory=InsuranceCapability, hash=False)
    gps: GPSCapability = field(default_factory=GPSCapability, hash=False)

    kind = VehicleKind.OPTIONED_CAR

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.insurance, InsuranceCapability):
            raise ConstructionError(f"Error: insurance must be an InsuranceCapability, got {self.insurance!r}")
        if not isinstance(self.gps, GPSCapability):
            raise ConstructionError(f"Error: gps must be a GPSCapability, got {self.gps!r}")

    @classmethod
    def build(cls, license_plate: str, daily_price: float, seat_count: int,
              insurance: bool = False, gps: bool = False,
              insurance_cost: float = DEFAULT_INSURANCE_COST,
              gps_cost: float = DEFAULT_GPS_COST) -> "OptionedCar":
        """Flag-style constructor: OptionedCar.build("GG-444-HH", 70, 5, True, True, 12.0, 7.0)."""
        return cls(
            license_plate=license_plate,
            daily_price=daily_price,
            seat_count=seat_count,
            insurance=InsuranceCapability(active=insurance, daily_cost=insurance_cost),
            gps=GPSCapability(active=gps, daily_cost=gps_cost),
        )

    @property
    def capabilities(self) -> Tuple[Capability, ...]:
        return (self.insurance, self.gps)

    def options_cost(self, num_days: int) -> float:
        return sum(c.cost(num_days) for c in self.capabilities)

    def total_cost(self, num_days: int, tax_rate: Optional[float] = None) -> float:
        return super().total_cost(num_days, tax_rate) + self.options_cost(num_days)

    def cost_breakdown(self, num_days: int, tax_rate: Optional[float] = None) -> dict:
        """
        Line items for `num_days`: base rental, tax, each active add-on, total.
        Inactive add-ons are left out.
        """
        rate = resolve_rate(tax_rate)
        base = self.rental_cost(num_days)
        out = {
            "days": num_days,
            "base_rental": base,
            "tax_rate": rate,
            "tax": base * rate,
        }
        for c in self.capabilities:
            if c.active:
                out[c.label.lower()] = c.cost(num_days)
        out["total"] = self.total_cost(num_days, rate)
        return out

    def duplicate(self) -> "OptionedCar":
        return replace(self, insurance=self.insurance.duplicate(), gps=self.gps.duplicate())

    def describe(self) -> str:
        parts = [self._summary("OptionedCar")]
        parts.extend(c.describe() for c in self.capabilities)
        return " ".join(parts)

    def as_dict(self) -> dict:
        data = super().as_dict()
        data["insurance"] = self.insurance.as_dict()
        data["gps"] = self.gps.as_dict()
        return data
