from flask import Blueprint, jsonify, request

from ..services.init import PricingService
from ..utils.decorators import fields_required

bp = Blueprint("settings", __name__, url_prefix="/settings")


@bp.get("/tax")
def get_tax():
    return jsonify(tax_rate=PricingService.get_tax())


@bp.put("/tax")
@fields_required("tax_rate")
def set_tax():
    """Change the shared tax rate; applies to every later cost query."""
    rate = PricingService.set_tax(request.get_json()["tax_rate"])
    return jsonify(ok=True, tax_rate=rate)
