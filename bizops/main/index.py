# bizops/main/index.py
from datetime import datetime, timezone

from flask import jsonify

from ..main import main
from ..utils.helpers import iso_timestamp


@main.route("/", methods=["GET"])
def index():
    return jsonify({
        "message": "Business Management System API",
        "endpoints": {
            "api": {
                "transactions": "/api/transactions",
                "analytics": "/api/analytics",
                "messages": "/api/messages",
                "health": "/api/health",
                "export": "/api/admin/export",
                "clear": "/api/admin/clear-data",
            }
        },
    })


@main.route("/api/health", methods=["GET"])
def health():
    return jsonify({
        "status": "OK",
        "message": "Server is running",
        "timestamp": iso_timestamp(datetime.now(timezone.utc)),
    })
