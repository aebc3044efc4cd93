from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects.role import Role


@dataclass(frozen=True, slots=True)
class CallerContext:
    """Resolved identity of whoever invokes a use case.

    Identity verification happens upstream; use cases only look at the role.
    """

    role: Role
    user_id: UUID | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
