from __future__ import annotations

from src.application.errors import PermissionDenied
from src.domain.value_objects.caller import CallerContext


def ensure_can_manage_rates(caller: CallerContext) -> None:
    if not caller.role.can_manage_rates():
        raise PermissionDenied("Only admin can manage milk rates")
