from __future__ import annotations

from enum import Enum

# Storage key used for rates that apply to any session.
ANY_SESSION_KEY = "any"


class DeliverySession(str, Enum):
    MORNING = "morning"
    EVENING = "evening"


def session_key(session: DeliverySession | None) -> str:
    return session.value if session is not None else ANY_SESSION_KEY


def pick_session(*candidates: DeliverySession | None) -> DeliverySession | None:
    """Return the first session supplied, in precedence order.

    Used at the request boundary to fold alias fields (``delivery_session``,
    ``shift``) into a single value before anything reaches the use cases.
    """
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None
