# bizops/main/__init__.py
# ---------------------------------
# Single blueprint named `main`; feature modules below register their routes.

from flask import Blueprint, request

main = Blueprint("main", __name__)


def json_body() -> dict:
    """JSON object body, or {} for anything else (arrays, scalars, bad JSON)."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def period_arg() -> str | None:
    """`filter` query arg (original name), `period` accepted as an alias."""
    return request.args.get("filter") or request.args.get("period")


# Route modules (keep these imports at the end)
from . import index, transactions, analytics, messages, admin  # noqa: E402,F401
