from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

from src.application.errors import ConflictError, NotFound
from src.interfaces.middleware.error_handler import error_payload


def test_conflict_details_are_json_ready():
    rate_id = uuid4()
    payload = error_payload(
        ConflictError(
            "Rate already exists",
            details={
                "conflicting_rate_id": rate_id,
                "effective_from": date(2024, 1, 1),
                "price_per_unit": Decimal("50.00"),
            },
        )
    )
    assert payload["code"] == "conflict"
    assert payload["details"] == {
        "conflicting_rate_id": str(rate_id),
        "effective_from": "2024-01-01",
        "price_per_unit": 50.0,
    }


def test_details_are_omitted_when_absent():
    assert error_payload(NotFound("Transaction not found")) == {
        "code": "not_found",
        "message": "Transaction not found",
    }
