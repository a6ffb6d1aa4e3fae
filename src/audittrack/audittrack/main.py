from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g, request

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .auth.controller import register as register_auth
from .cloud.controller import register as register_cloud
from .common.web import load_state, save_state
from .container import build_container
from .core.enums import ServiceType, UserRole, View
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .entities.controller import register as register_entities
from .entries.controller import register as register_entries

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[dict] = None, **container_options) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATA_DIR"] = str(getattr(settings, "DATA_DIR", "instance"))
    app.config["AUTO_INIT_DB"] = bool(getattr(settings, "AUTO_INIT_DB", False))
    app.config.update(overrides or {})
    if "SECRET_KEY" in (overrides or {}):
        app.secret_key = app.config["SECRET_KEY"]

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.INFO)

    data_dir = Path(app.config["DATA_DIR"])
    if not data_dir.is_absolute():
        data_dir = Path(app.root_path).parents[2] / data_dir
    container = build_container(data_dir=data_dir, **container_options)

    remote = container.resolver.current()
    if app.config["AUTO_INIT_DB"] and remote is not None and remote.is_valid():
        try:
            apply_schema(DBConfig.from_remote_config(remote))
        except Exception:
            logger.exception("Could not apply schema to the remote database")

    if app.config["DEBUG"]:
        print(
            "[audittrack] settings=", settings_module,
            " storage=", container.gateway().describe(),
        )

    @app.before_request
    def _load_state():
        if request.endpoint == "static":
            return None
        load_state(container)
        return None

    @app.after_request
    def _save_state(response):
        state = g.get("state")
        if state is not None:
            save_state(state)
        return response

    @app.context_processor
    def _inject_state():
        return {
            "state": g.get("state"),
            "View": View,
            "ServiceType": ServiceType,
            "UserRole": UserRole,
        }

    register_auth(app, container)
    register_entries(app, container)
    register_entities(app, container)
    register_analytics(app, container)
    register_cloud(app, container)

    app.extensions["audittrack"] = container
    return app


if __name__ == "__main__":
    create_app().run()
