"""Plant-extract storefront Flask application."""

from __future__ import annotations

from typing import Optional

from flask import Flask

from routes import api
from storefront.config import AppConfig, load_env
from storefront.db.session import build_engine, build_session_factory, init_db
from storefront.services.catalog_service import CatalogService
from storefront.services.impact_service import ImpactService


def create_app(config: Optional[AppConfig] = None, session_factory=None) -> Flask:
    config = config or load_env()
    if session_factory is None:
        engine = build_engine(config.database_url)
        init_db(engine)
        session_factory = build_session_factory(engine)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.secret_key
    app.config["STOREFRONT_CONFIG"] = config

    components = {
        "catalog": CatalogService(session_factory),
        "impact": ImpactService(session_factory),
    }
    app.extensions["storefront_components"] = components

    app.register_blueprint(api.api_bp)

    return app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=False)


if __name__ == "__main__":
    main()
