# users_api/api/schemas/user_schema.py
from pydantic import BaseModel, ConfigDict, Field

from users_api.core.entities import User


class UserRequest(BaseModel):
    """Corpo de POST/PUT. Campos ausentes viram None; `id` é ignorado."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None

    def to_entity(self) -> User:
        return User(
            id=None,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )
