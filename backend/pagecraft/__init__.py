import logging

from flask import Flask
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .ai.client import init_completion_client
from .errors import register_error_handlers


def configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("pagecraft").setLevel(level)


def create_app(config_name: str = "development", completion_client=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    configure_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    from .models import audit_log, page, section  # noqa: F401  register tables

    # -------------------------------------------------
    # Completion service
    # -------------------------------------------------
    init_completion_client(app, completion_client)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    return app
