# users_api/services/user_service.py

import logging

from users_api.core.entities import User
from users_api.core.exceptions import NotFoundError
from users_api.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def create(self, user: User) -> User:
        logger.debug("User create action called")
        return self._user_repository.save(user)

    def find_by_id(self, user_id: int) -> User:
        logger.debug("User findById action called")
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User of id {user_id} not found.")
        return user

    def find_all(self) -> list[User]:
        logger.debug("User findAll action called")
        return self._user_repository.find_all()

    def update(self, user_id: int, patch: User) -> User:
        """
        Sobrescreve first_name, last_name e email com os valores de `patch`,
        inclusive None. O id do registro encontrado é mantido.
        """
        logger.debug("User update action called")
        user = self.find_by_id(user_id)

        user.first_name = patch.first_name
        user.last_name = patch.last_name
        user.email = patch.email

        self._user_repository.save(user)
        return user

    def delete(self, user_id: int) -> None:
        # sem checagem de existência: id inexistente não gera NotFoundError
        logger.debug("User delete action called")
        self._user_repository.delete_by_id(user_id)
