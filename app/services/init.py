from .agency_service import AgencyService
from .pricing_service import PricingService
from .vehicle_service import VehicleService

__all__ = [
    "AgencyService",
    "PricingService",
    "VehicleService",
]
