# tests/conftest.py
import os

# precisa vir antes de qualquer import de users_api (engine é criado no import)
os.environ["DB_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["DB_CREATE_TABLES"] = "true"

import pytest  # noqa: E402

from users_api.core.entities import User  # noqa: E402
from users_api.infrastructure.database.init_db import drop_db, init_db  # noqa: E402
from users_api.main import app as flask_app  # noqa: E402


class InMemoryUserRepository:
    """Gateway falso: mesmo contrato do UserRepository, guardando cópias em um dict."""

    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self._next_id = 1
        self.saved: list[User] = []

    def save(self, user: User) -> User:
        user_id = user.id
        if user_id is None or user_id not in self.rows:
            user_id = self._next_id
            self._next_id += 1

        stored = User(id=user_id, first_name=user.first_name, last_name=user.last_name, email=user.email)
        self.rows[user_id] = stored
        self.saved.append(stored)
        return User(**vars(stored))

    def find_by_id(self, user_id: int) -> User | None:
        stored = self.rows.get(user_id)
        return User(**vars(stored)) if stored is not None else None

    def find_all(self) -> list[User]:
        return [User(**vars(u)) for u in self.rows.values()]

    def delete_by_id(self, user_id: int) -> None:
        self.rows.pop(user_id, None)


@pytest.fixture(autouse=True)
def reset_db():
    drop_db()
    init_db()
    yield


@pytest.fixture
def fake_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app():
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
