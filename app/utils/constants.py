# app/utils/constants.py

"""
Global constants for vehicle kinds, pricing defaults, and insertion outcomes.
These constants are imported by both models and services.
"""

# --- Pricing ---
DEFAULT_TAX_RATE = 0.20
UTILITY_RATE_PER_M3 = 5.0  # per cubic meter per day, pre-tax
DEFAULT_SEAT_COUNT = 5
DEFAULT_INSURANCE_COST = 10.0
DEFAULT_GPS_COST = 5.0

# Joins both agency names on merge: "Center" + "North" -> "Center_North"
MERGE_SEPARATOR = "_"


class VehicleKind:
    CAR = "car"
    UTILITY = "utility"
    OPTIONED_CAR = "optioned_car"


class InsertRejection:
    CAPACITY_EXCEEDED = "capacity_exceeded"
    INVALID_REFERENCE = "invalid_reference"


# --- Misc ---
ALLOWED_KINDS = {VehicleKind.CAR, VehicleKind.UTILITY, VehicleKind.OPTIONED_CAR}
