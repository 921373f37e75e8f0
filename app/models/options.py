from dataclasses import dataclass, replace

from .vehicle import _check_days, _non_negative
from ..exceptions import ConstructionError
from ..utils.constants import DEFAULT_GPS_COST, DEFAULT_INSURANCE_COST
from ..utils.filters import fmt_money


@dataclass
class Capability:
    """
    An add-on that can be attached to a vehicle kind: an on/off flag and a
    daily cost. Capabilities hold no identity and never reference a vehicle;
    the owning kind decides how their cost is combined.
    """
    active: bool = False
    daily_cost: float = 0.0

    title = "Option"  # shown when active
    label = "option"  # shown as "No <label>" when inactive

    def __post_init__(self):
        if not isinstance(self.active, bool):
            raise ConstructionError(f"Error: {self.label} flag must be true or false, got {self.active!r}")
        self.daily_cost = _non_negative(f"{self.label} daily cost", self.daily_cost)

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def set_daily_cost(self, cost: float) -> None:
        self.daily_cost = _non_negative(f"{self.label} daily cost", cost)

    def cost(self, num_days: int) -> float:
        """Untaxed cost for `num_days`; zero while inactive."""
        days = _check_days(num_days)
        return self.daily_cost * days if self.active else 0.0

    def duplicate(self) -> "Capability":
        return replace(self)

    def describe(self) -> str:
        if self.active:
            return f"({self.title}: {fmt_money(self.daily_cost)}/day)"
        return f"(No {self.label})"

    def as_dict(self) -> dict:
        return {"active": self.active, "daily_cost": self.daily_cost}


@dataclass
class InsuranceCapability(Capability):
    daily_cost: float = DEFAULT_INSURANCE_COST

    title = "Insurance"
    label = "insurance"


@dataclass
class GPSCapability(Capability):
    daily_cost: float = DEFAULT_GPS_COST

    title = "GPS"
    label = "GPS"
