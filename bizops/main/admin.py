# bizops/main/admin.py
from datetime import datetime, timezone

from flask import Response, current_app, jsonify, request

from ..main import json_body, main, period_arg
from ..services.admin import clear_all_data
from ..services.export import export_transactions
from ..utils.helpers import iso_timestamp


@main.route("/api/admin/clear-data", methods=["DELETE"], endpoint="admin_clear")
def admin_clear():
    payload = json_body()
    result = clear_all_data(payload.get("confirmClear"))
    current_app.logger.info(f"[admin] clear-data: txns={result.transactions} msgs={result.messages}")
    return jsonify({
        "message": "All data cleared successfully",
        "cleared": {
            "transactions": result.transactions,
            "messages": result.messages,
        },
        "backup": str(result.backup_path) if result.backup_path else None,
        "timestamp": iso_timestamp(datetime.now(timezone.utc)),
    })


@main.route("/api/admin/export", methods=["GET"], endpoint="admin_export")
def admin_export():
    result = export_transactions(period_arg(), request.args.get("format"))
    if result.filename:
        return Response(result.body, mimetype=result.mimetype,
                        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'})
    return jsonify(result.body)
