from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.user import User


class UsersRepository(Protocol):
    async def add(self, user: User) -> User: ...
    async def get(self, user_id: UUID) -> User | None: ...
