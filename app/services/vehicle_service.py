from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from app.exceptions import VehicleNotFoundError
from app.services.common import _store, norm_kind, to_int_safe, vehicle_from_dict
from app.utils.constants import ALLOWED_KINDS

if TYPE_CHECKING:
    # Only for type hints; won't execute at runtime
    from app.models.store import Store  # noqa: F401


class VehicleService:
    """Vehicle catalogue: create, look up, delete, quote."""

    @staticmethod
    def create_vehicle(payload: dict, store: Optional["Store"] = None):
        """
        Build a vehicle from a request payload and register it.
        Unknown kinds are rejected here; out-of-domain values raise
        ConstructionError from the model.

        Returns:
            (ok: bool, message: str, vehicle_id: Optional[int])
        """
        st = store or _store()

        kind = norm_kind((payload or {}).get("kind"))
        if kind not in ALLOWED_KINDS:
            return False, "Invalid vehicle kind", None

        vehicle = vehicle_from_dict(payload)
        vid = st.add_vehicle(vehicle)
        return True, "Vehicle created", vid

    @staticmethod
    def get_vehicle(vid, store: Optional["Store"] = None):
        """Return a vehicle by ID or raise VehicleNotFoundError."""
        st = store or _store()
        key = to_int_safe(vid)
        v = st.get_vehicle(key) if key is not None else None
        if v is None:
            raise VehicleNotFoundError(f"Error: vehicle with ID '{vid}' not found")
        return v

    @staticmethod
    def all_vehicles(store: Optional["Store"] = None):
        st = store or _store()
        return sorted(st.vehicles.values(), key=lambda v: v.id)

    @staticmethod
    def delete_vehicle(vid, store: Optional["Store"] = None):
        """
        Remove a catalogue vehicle. Agencies that took it in keep their own
        duplicates, so there is nothing to guard against.
        """
        st = store or _store()
        key = to_int_safe(vid)
        if key is None or not st.delete_vehicle(key):
            return False, "Vehicle not found"
        return True, "Vehicle deleted"

    @staticmethod
    def quote(vid, num_days: int, store: Optional["Store"] = None) -> dict:
        """
        Price a catalogue vehicle for `num_days`.
        Kinds that expose a line-item breakdown get it attached.
        """
        v = VehicleService.get_vehicle(vid, store=store)
        tax_rate = v.get_tax()
        out = {
            "vehicle_id": v.id,
            "days": num_days,
            "rental_cost": round(v.rental_cost(num_days), 2),
            "tax_rate": tax_rate,
            "total_cost": round(v.total_cost(num_days, tax_rate), 2),
        }
        breakdown = getattr(v, "cost_breakdown", None)
        if callable(breakdown):
            out["breakdown"] = {k: (round(x, 2) if isinstance(x, float) else x)
                                for k, x in breakdown(num_days, tax_rate).items()}
        return out
