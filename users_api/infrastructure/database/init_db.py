"""
Criação do schema a partir do metadata do SQLAlchemy.

Não há migrations: `create_all` só cria a tabela `users` quando ela ainda não existe.
"""
import logging

import users_api.infrastructure.database.models  # noqa: F401
from users_api.infrastructure.database.base_model import BaseModel
from users_api.infrastructure.database.session import get_engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    logger.info("Creating database tables (if missing)")
    BaseModel.metadata.create_all(bind=get_engine())


def drop_db() -> None:
    BaseModel.metadata.drop_all(bind=get_engine())
