# users_api/api/routes/__init__.py

from flask import Flask

from users_api.api.converters import BigIntConverter
from users_api.api.routes.ping_routes import bp_ping
from users_api.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, api_prefix: str) -> None:
    # precisa existir antes de registrar os blueprints que usam <bigint:...>
    app.url_map.converters["bigint"] = BigIntConverter

    app.register_blueprint(bp_ping, url_prefix=f"{api_prefix}/ping")
    app.register_blueprint(bp_users, url_prefix=f"{api_prefix}/users")
