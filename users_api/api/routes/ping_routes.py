# users_api/api/routes/ping_routes.py

import logging

from flask import Blueprint, Response

logger = logging.getLogger(__name__)

bp_ping = Blueprint("ping", __name__, url_prefix="/ping")

PONG = "Pong >>> It works!"


@bp_ping.get("")
def ping():
    logger.debug("Ping action called")
    return Response(PONG, status=200, mimetype="text/plain")
