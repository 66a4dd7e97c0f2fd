# bizops/main/transactions.py
from flask import jsonify

from ..main import json_body, main, period_arg
from ..services.transactions import create_transaction, list_transactions


@main.route("/api/transactions", methods=["GET"], endpoint="transactions_list")
def transactions_list():
    rows = list_transactions(period_arg())
    return jsonify([t.to_dict() for t in rows])


@main.route("/api/transactions", methods=["POST"], endpoint="transactions_create")
def transactions_create():
    payload = json_body()
    txn = create_transaction(payload)
    return jsonify({
        "id": txn.id,
        "message": "Transaction added successfully",
        "transaction": txn.to_dict(),
    })
