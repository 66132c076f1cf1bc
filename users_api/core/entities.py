# users_api/core/entities.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """Usuário do domínio. `id` é atribuído pelo banco na criação e nunca muda depois."""

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
