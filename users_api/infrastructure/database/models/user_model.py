# users_api/infrastructure/database/models/user_model.py

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from users_api.infrastructure.database.base_model import BaseModel


class UserModel(BaseModel):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
