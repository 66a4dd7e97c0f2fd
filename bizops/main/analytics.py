# bizops/main/analytics.py
from flask import jsonify

from ..main import main, period_arg
from ..services.analytics import compute_analytics


@main.route("/api/analytics", methods=["GET"], endpoint="analytics")
def analytics():
    return jsonify(compute_analytics(period_arg()).to_dict())
