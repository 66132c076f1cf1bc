# users_api/main.py
from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from users_api.api.middlewares.error_handler import register_error_handlers
from users_api.api.routes import register_routes
from users_api.config.flask_config import configure_app
from users_api.config.settings import settings
from users_api.infrastructure.database.init_db import init_db


def create_app() -> Flask:
    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{settings.api_prefix}/*": {"origins": settings.cors_origins}},
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    configure_app(app)

    register_routes(app, api_prefix=settings.api_prefix)

    register_error_handlers(app)

    if settings.db_create_tables:
        init_db()

    return app


app = create_app()

if __name__ == "__main__":
    # em produção: gunicorn "users_api.main:app"
    app.run(host="0.0.0.0", port=8080, debug=settings.debug)
