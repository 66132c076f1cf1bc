# Registra as tabelas no metadata do BaseModel
from users_api.infrastructure.database.models.user_model import UserModel  # noqa: F401
