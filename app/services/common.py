"""Shared service helpers and factories."""

from typing import Optional

from app.models.optioned_car import OptionedCar
from app.models.options import GPSCapability, InsuranceCapability
from app.models.store import Store
from app.models.vehicle import Car, Utility, Vehicle
from app.utils.constants import (
    DEFAULT_GPS_COST,
    DEFAULT_INSURANCE_COST,
    DEFAULT_SEAT_COUNT,
    VehicleKind,
)


def _store() -> Store:
    """Get the singleton store instance."""
    return Store.instance()


# -------- input coercion --------
def norm_kind(value: Optional[str]) -> str:
    """Normalize vehicle kind to lowercase; 'optioned-car' -> 'optioned_car'; '' for None or non-text."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower().replace("-", "_")


def to_float_safe(value) -> Optional[float]:
    """Safely convert to float; return None if invalid."""
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_int_safe(value) -> Optional[int]:
    """Convert '3' / 3 / 3.0 to int; None for anything fractional or invalid."""
    if isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    if not f.is_integer():
        return None
    return int(f)


def _number(d: dict, key: str, default):
    """Numeric payload field; invalid text is passed through so the model rejects it."""
    raw = d.get(key)
    if raw is None or raw == "":
        return default
    parsed = to_float_safe(raw)
    return raw if parsed is None else parsed


def _count(d: dict, key: str, default):
    raw = d.get(key)
    if raw is None or raw == "":
        return default
    parsed = to_int_safe(raw)
    return raw if parsed is None else parsed


_TRUE_TEXT = ("true", "1", "yes", "on")
_FALSE_TEXT = ("false", "0", "no", "off", "")


def _text(raw):
    """Strip text input; None becomes ''; anything else is passed through so the model rejects it."""
    if raw is None:
        return ""
    return raw.strip() if isinstance(raw, str) else raw


def _flag(raw):
    """On/off payload field; unrecognised values are passed through so the model rejects them."""
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in _TRUE_TEXT:
            return True
        if text in _FALSE_TEXT:
            return False
    return raw


def _option(raw) -> dict:
    """Add-on payload: either {"active": ..., "daily_cost": ...} or a bare flag."""
    if isinstance(raw, dict):
        return raw
    return {"active": raw}


# -------- dict -> rich model mappers --------
def vehicle_from_dict(d: Optional[dict]) -> Optional[Vehicle]:
    """
    Map a request payload to a vehicle object. Unknown kinds map to a plain Car.
    Out-of-domain values raise ConstructionError from the model itself.
    """
    if not d:
        return None
    kind = norm_kind(d.get("kind"))
    base = dict(
        license_plate=_text(d.get("license_plate")),
        daily_price=_number(d, "daily_price", 0.0),
    )
    if kind == VehicleKind.UTILITY:
        return Utility(**base, volume_cubic_meters=_number(d, "volume_cubic_meters", 0.0))
    seats = _count(d, "seat_count", DEFAULT_SEAT_COUNT)
    if kind == VehicleKind.OPTIONED_CAR:
        ins = _option(d.get("insurance"))
        gps = _option(d.get("gps"))
        return OptionedCar(
            **base,
            seat_count=seats,
            insurance=InsuranceCapability(active=_flag(ins.get("active")),
                                          daily_cost=_number(ins, "daily_cost", DEFAULT_INSURANCE_COST)),
            gps=GPSCapability(active=_flag(gps.get("active")),
                              daily_cost=_number(gps, "daily_cost", DEFAULT_GPS_COST)),
        )
    return Car(**base, seat_count=seats)
