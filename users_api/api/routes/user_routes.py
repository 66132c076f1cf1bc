# users_api/api/routes/user_routes.py

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from users_api.api.schemas.user_schema import UserRequest, UserResponse
from users_api.infrastructure.database.session import db_session
from users_api.repositories.user_repository import UserRepository
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)

bp_users = Blueprint("users", __name__, url_prefix="/users")


# -------------------------
# Helpers
# -------------------------

def _build_service(session) -> UserService:
    return UserService(UserRepository(session))


def _dump(user) -> dict:
    return UserResponse.from_entity(user).model_dump(by_alias=True)


# -------------------------
# Rotas
# -------------------------

@bp_users.post("")
def create_user():
    logger.debug("User create controller called")
    payload = UserRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        service = _build_service(session)
        created = service.create(payload.to_entity())

    return jsonify(_dump(created)), 200


@bp_users.get("")
def list_users():
    logger.debug("User findAll controller called")

    with db_session() as session:
        service = _build_service(session)
        users = service.find_all()

    return jsonify([_dump(u) for u in users]), 200


@bp_users.get("/<bigint:user_id>")
def get_user(user_id: int):
    logger.debug("User findOne controller called with id: %s", user_id)

    with db_session() as session:
        service = _build_service(session)
        user = service.find_by_id(user_id)

    return jsonify(_dump(user)), 200


@bp_users.put("/<bigint:user_id>")
def update_user(user_id: int):
    """
    Substitui firstName, lastName e email. Campos omitidos no corpo viram null.
    """
    logger.debug("User update controller called with id: %s", user_id)
    payload = UserRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        service = _build_service(session)
        updated = service.update(user_id, payload.to_entity())

    return jsonify(_dump(updated)), 200


@bp_users.delete("/<bigint:user_id>")
def delete_user(user_id: int):
    logger.debug("User delete controller called with id: %s", user_id)

    with db_session() as session:
        service = _build_service(session)
        service.delete(user_id)

    return ("", 204)
