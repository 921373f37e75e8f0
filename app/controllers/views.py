from flask import Blueprint, jsonify

from ..services.init import AgencyService, PricingService, VehicleService

bp = Blueprint("views", __name__)


@bp.get("/")
def home():
    """Overview: catalogue size, registered agencies, current tax rate."""
    agencies = AgencyService.all_agencies()
    return jsonify(
        vehicles=len(VehicleService.all_vehicles()),
        agencies=[a.name for a in agencies],
        tax_rate=PricingService.get_tax(),
    )
