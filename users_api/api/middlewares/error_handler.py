# users_api/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from users_api.config.settings import settings
from users_api.core.exceptions import AppError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        details = [
            {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
            for e in err.errors()
        ]
        return jsonify({"error": "Invalid request body.", "details": details}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        headers = [(k, v) for k, v in err.get_headers() if k.lower() != "content-type"]
        return jsonify({"error": err.description}), err.code, headers

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Unhandled error")

        if settings.debug:
            return jsonify({"error": str(err)}), 500

        return jsonify({"error": "Internal server error"}), 500
