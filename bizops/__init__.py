# bizops/__init__.py
# ------------------------------------------------------------
# Flask application factory, registration split by concern:
# - register_extensions()      db, migrate, backups
# - register_blueprints()      /api + index
# - register_cli()
# - register_error_handlers()  JSON errors, never crash the process
# - start_scheduler()          background backups
# ------------------------------------------------------------

import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .errors import BizOpsError, StorageError
from .extensions import db, migrate
from . import models  # noqa: F401  # ensure models registered

# Load environment from .env exactly once
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    env = os.getenv("FLASK_ENV", "development").lower()
    cfg = {
        "production": "bizops.config.Production",
        "testing": "bizops.config.Testing",
    }.get(env, "bizops.config.Development")
    app.config.from_object(cfg)
    if overrides:
        app.config.update(overrides)
    _resolve_database_uri(app)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )

    register_extensions(app)
    register_blueprints(app)
    register_cli(app)
    register_error_handlers(app)

    from .scheduler import start_scheduler
    start_scheduler(app)
    return app


def _resolve_database_uri(app: Flask) -> None:
    """DATABASE_URL (already in config) wins; otherwise build a SQLite URI from DB_PATH."""
    if app.config.get("SQLALCHEMY_DATABASE_URI"):
        return
    path = app.config.get("DB_PATH") or "./business.db"
    if path == ":memory:":
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
    else:
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///" + os.path.abspath(path)


# ---------------------------
# Registrations (by concern)
# ---------------------------
def register_extensions(app: Flask) -> None:
    """Initialize db, migrate and the backup manager; create tables on first boot."""
    from .services.backup import init_backups

    db.init_app(app)
    migrate.init_app(app, db)
    init_backups(app)

    if app.config.get("AUTO_CREATE_SCHEMA", True):
        with app.app_context():
            db.create_all()
        app.logger.info(f"Connected to database: {app.config['SQLALCHEMY_DATABASE_URI']}")


def register_blueprints(app: Flask) -> None:
    """Keep imports local to avoid circulars."""
    from .main import main as main_blueprint

    app.register_blueprint(main_blueprint)  # /, /api/...


def register_cli(app: Flask) -> None:
    from .cli import register_cli as _register_cli
    _register_cli(app)


def register_error_handlers(app: Flask) -> None:
    """Every failure leaves as JSON {"error": ...}."""

    @app.errorhandler(BizOpsError)
    def _bizops_error(e: BizOpsError):
        if isinstance(e, StorageError):
            app.logger.exception(f"Storage failure: {e}")
        return jsonify(error=str(e)), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def _db_error(e: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Unhandled database error")
        return jsonify(error="Database error"), 500

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify(error=e.description), e.code

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        app.logger.exception("Unhandled error")
        return jsonify(error="Something went wrong!"), 500
