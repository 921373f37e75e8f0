from flask import Blueprint, Response, jsonify, request

from ..services.init import AgencyService
from ..utils.decorators import days_required, fields_required

bp = Blueprint("agencies", __name__, url_prefix="/agencies")


@bp.get("")
def list_agencies():
    return jsonify(agencies=[a.as_dict() for a in AgencyService.all_agencies()])


@bp.post("")
@fields_required("name", "capacity")
def create_agency():
    form = request.get_json()
    ok, msg, name = AgencyService.create_agency(form.get("name"), form.get("capacity"))
    if not ok:
        return jsonify(ok=False, message=msg), 409 if msg == "Agency name exists" else 400
    return jsonify(ok=True, message=msg, agency=AgencyService.get_agency(name).as_dict()), 201


@bp.post("/merge")
@fields_required("left", "right")
def merge_agencies():
    """Merge two agencies into a new one named "<left>_<right>"."""
    form = request.get_json()
    ok, msg, name = AgencyService.merge_agencies(form["left"], form["right"])
    if not ok:
        return jsonify(ok=False, message=msg), 409
    return jsonify(ok=True, message=msg, agency=AgencyService.get_agency(name).as_dict()), 201


@bp.get("/<name>")
def agency_detail(name):
    """One agency; ?format=text returns its describe() block."""
    agency = AgencyService.get_agency(name)
    if request.args.get("format") == "text":
        return Response(agency.describe(), mimetype="text/plain")
    return jsonify(agency=agency.as_dict())


@bp.post("/<name>/vehicles")
@fields_required("vehicle_id")
def add_vehicle(name):
    """Insert a duplicate of a catalogue vehicle; 409 when full or the vehicle is unknown."""
    ok, msg = AgencyService.add_vehicle(name, request.get_json()["vehicle_id"])
    if not ok:
        return jsonify(ok=False, message=msg), 409
    return jsonify(ok=True, message=msg, agency=AgencyService.get_agency(name).as_dict()), 201


@bp.post("/<name>/copy")
@fields_required("name")
def copy_agency(name):
    ok, msg, new_name = AgencyService.copy_agency(name, request.get_json()["name"])
    if not ok:
        return jsonify(ok=False, message=msg), 409 if msg == "Agency name exists" else 400
    return jsonify(ok=True, message=msg, agency=AgencyService.get_agency(new_name).as_dict()), 201


@bp.get("/<name>/total")
@days_required
def total_to_pay(name, num_days):
    return jsonify(agency=name, days=num_days, total=AgencyService.total_to_pay(name, num_days))
