# users_api/repositories/user_repository.py

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from users_api.core.base_repository import BaseRepository
from users_api.core.entities import User
from users_api.infrastructure.database.models.user_model import UserModel


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: Session) -> None:
        super().__init__(session)

    # -------------------------
    # Mapeamento entidade <-> linha
    # -------------------------

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
        )

    @staticmethod
    def _copy_fields(user: User, model: UserModel) -> None:
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email

    # -------------------------
    # CRUD
    # -------------------------

    def save(self, user: User) -> User:
        """
        Insere quando `user.id` é None; caso contrário sobrescreve a linha com esse id.
        Se o id não existe, cria uma linha nova com id gerado pelo banco (a sequence nunca é pulada).
        """
        model = None
        if user.id is not None:
            model = self._session.get(UserModel, int(user.id))

        if model is None:
            model = UserModel()
            self._session.add(model)

        self._copy_fields(user, model)
        self._session.flush()
        return self._to_entity(model)

    def find_by_id(self, user_id: int) -> User | None:
        stmt = select(UserModel).where(UserModel.id == int(user_id))
        model = self._session.execute(stmt).scalar_one_or_none()
        return self._to_entity(model) if model is not None else None

    def find_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        return [self._to_entity(m) for m in self._session.execute(stmt).scalars().all()]

    def delete_by_id(self, user_id: int) -> None:
        stmt = delete(UserModel).where(UserModel.id == int(user_id))
        self._session.execute(stmt)
