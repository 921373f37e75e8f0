from flask import Blueprint, Response, jsonify, request

from ..services.init import VehicleService
from ..utils.decorators import days_required, fields_required

bp = Blueprint("vehicles", __name__, url_prefix="/vehicles")


@bp.get("")
def list_vehicles():
    """Catalogue vehicles, oldest first."""
    vehicles = VehicleService.all_vehicles()
    return jsonify(vehicles=[v.as_dict() for v in vehicles])


@bp.post("")
@fields_required("kind")
def create_vehicle():
    """Create a catalogue vehicle from a JSON payload (kind + kind-specific fields)."""
    ok, msg, vid = VehicleService.create_vehicle(request.get_json())
    if not ok:
        return jsonify(ok=False, message=msg), 400
    return jsonify(ok=True, message=msg, vehicle=VehicleService.get_vehicle(vid).as_dict()), 201


@bp.get("/<vid>")
def vehicle_detail(vid):
    """One vehicle; ?format=text returns its describe() line."""
    v = VehicleService.get_vehicle(vid)
    if request.args.get("format") == "text":
        return Response(v.describe(), mimetype="text/plain")
    return jsonify(vehicle=v.as_dict(), description=v.describe())


@bp.delete("/<vid>")
def delete_vehicle(vid):
    ok, msg = VehicleService.delete_vehicle(vid)
    return jsonify(ok=ok, message=msg), (200 if ok else 404)


@bp.get("/<vid>/quote")
@days_required
def quote(vid, num_days):
    return jsonify(VehicleService.quote(vid, num_days))
