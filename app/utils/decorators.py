from functools import wraps

from flask import jsonify, request

from ..services.common import to_int_safe


def days_required(fn):
    """Parse ?days=N into a `num_days` keyword argument; 400 unless N is an integer >= 0."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        days = to_int_safe(request.args.get("days"))
        if days is None or days < 0:
            return jsonify(ok=False, message="Query parameter 'days' must be a non-negative integer"), 400
        return fn(*args, num_days=days, **kwargs)

    return wrapper


def fields_required(*fields):
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                return jsonify(ok=False, message="Expected a JSON object body"), 400
            missing = [f for f in fields if payload.get(f) in (None, "")]
            if missing:
                return jsonify(ok=False, message=f"Missing field(s): {', '.join(missing)}"), 400
            return fn(*args, **kwargs)

        return wrapper

    return deco
