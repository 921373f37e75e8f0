from flask import Flask, jsonify

from .controllers.agencies import bp as agencies_bp
from .controllers.settings import bp as settings_bp
from .controllers.vehicles import bp as vehicles_bp
from .controllers.views import bp as views_bp
from .exceptions import AgencyNotFoundError, ConstructionError, MergeCapacityError, VehicleNotFoundError
from .models.store import Store
from .models.tax import shared_tax
from .utils.constants import DEFAULT_TAX_RATE
from .utils.filters import fmt_money


def _register_error_handlers(app):
    def not_found(e):
        return jsonify(ok=False, message=e.message), 404

    def bad_request(e):
        return jsonify(ok=False, message=e.message), 400

    def conflict(e):
        return jsonify(ok=False, message=e.message), 409

    app.register_error_handler(VehicleNotFoundError, not_found)
    app.register_error_handler(AgencyNotFoundError, not_found)
    app.register_error_handler(ConstructionError, bad_request)
    app.register_error_handler(MergeCapacityError, conflict)


def create_app(config=None):
    app = Flask(__name__)
    app.config["SECRET_KEY"] = "dev-secret-change-me"
    app.config["TAX_RATE"] = DEFAULT_TAX_RATE
    if config:
        app.config.update(config)
    shared_tax.set(app.config["TAX_RATE"])  # process-start tax; /settings/tax can change it later
    Store.instance()
    app.register_blueprint(views_bp)
    app.register_blueprint(vehicles_bp)
    app.register_blueprint(agencies_bp)
    app.register_blueprint(settings_bp)
    _register_error_handlers(app)
    app.jinja_env.filters["fmt_money"] = fmt_money

    return app
