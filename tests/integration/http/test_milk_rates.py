from __future__ import annotations

from decimal import Decimal


async def test_admin_manages_rates_round_trip(client, headers_for):
    admin = headers_for("admin")
    create = await client.post(
        "/api/v1/milk-rates/",
        json={
            "milk_type": "cow",
            "delivery_session": "morning",
            "price_per_unit": 50.0,
            "effective_from": "2024-01-01",
        },
        headers=admin,
    )
    assert create.status_code == 201, create.text
    rate = create.json()
    assert rate["delivery_session"] == "morning"
    assert rate["is_active"] is True

    # same key resubmitted merges into the existing row
    again = await client.post(
        "/api/v1/milk-rates/",
        json={
            "milk_type": "cow",
            "shift": "morning",
            "price_per_unit": 52.0,
            "effective_from": "2024-01-01",
        },
        headers=admin,
    )
    assert again.status_code == 201, again.text
    assert again.json()["id"] == rate["id"]
    assert Decimal(again.json()["price_per_unit"]) == Decimal("52")

    listing = await client.get("/api/v1/milk-rates/", headers=admin)
    assert listing.status_code == 200
    assert [r["id"] for r in listing.json()] == [rate["id"]]

    resolved = await client.get(
        "/api/v1/milk-rates/resolve",
        params={"milk_type": "cow", "delivery_session": "morning", "date": "2024-02-10"},
        headers=admin,
    )
    assert resolved.status_code == 200, resolved.text
    assert resolved.json()["rate_id"] == rate["id"]
    assert Decimal(resolved.json()["price_per_unit"]) == Decimal("52")

    deleted = await client.delete(f"/api/v1/milk-rates/{rate['id']}", headers=admin)
    assert deleted.status_code == 204
    missing = await client.delete(f"/api/v1/milk-rates/{rate['id']}", headers=admin)
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


async def test_all_sessions_rate_is_listed_only_on_request(client, headers_for):
    admin = headers_for("admin")
    resp = await client.post(
        "/api/v1/milk-rates/",
        json={
            "milk_type": "buffalo",
            "applies_to_all_sessions": True,
            "price_per_unit": 70.0,
            "effective_from": "2024-01-01",
        },
        headers=admin,
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["delivery_session"] is None

    hidden = await client.get("/api/v1/milk-rates/", headers=admin)
    assert hidden.json() == []
    shown = await client.get(
        "/api/v1/milk-rates/", params={"include_unscoped": "true"}, headers=admin
    )
    assert len(shown.json()) == 1

    resolved = await client.get(
        "/api/v1/milk-rates/resolve",
        params={"milk_type": "buffalo", "delivery_session": "evening", "date": "2024-01-01"},
        headers=admin,
    )
    assert resolved.status_code == 200
    assert resolved.json()["delivery_session"] == "evening"


async def test_update_into_existing_key_conflicts(client, headers_for):
    admin = headers_for("admin")
    payload = {"milk_type": "cow", "price_per_unit": 50.0, "effective_from": "2024-01-01"}
    morning = await client.post(
        "/api/v1/milk-rates/", json={**payload, "delivery_session": "morning"}, headers=admin
    )
    evening = await client.post(
        "/api/v1/milk-rates/", json={**payload, "delivery_session": "evening"}, headers=admin
    )
    resp = await client.put(
        f"/api/v1/milk-rates/{evening.json()['id']}",
        json={"delivery_session": "morning"},
        headers=admin,
    )
    assert resp.status_code == 409
    body = resp.json()
    assert body["code"] == "conflict"
    assert body["details"]["conflicting_rate_id"] == morning.json()["id"]

    ok = await client.put(
        f"/api/v1/milk-rates/{evening.json()['id']}",
        json={"price_per_unit": 55.5, "is_active": False},
        headers=admin,
    )
    assert ok.status_code == 200, ok.text
    assert Decimal(ok.json()["price_per_unit"]) == Decimal("55.5")
    assert ok.json()["is_active"] is False


async def test_resolve_without_rate_reports_rate_not_found(client, headers_for):
    resp = await client.get(
        "/api/v1/milk-rates/resolve",
        params={"milk_type": "cow", "delivery_session": "morning", "date": "2024-01-01"},
        headers=headers_for("seller"),
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "rate_not_found"


async def test_non_admin_cannot_manage_rates(client, headers_for):
    resp = await client.post(
        "/api/v1/milk-rates/",
        json={"milk_type": "cow", "price_per_unit": 1.0, "effective_from": "2024-01-01"},
        headers=headers_for("seller"),
    )
    assert resp.status_code == 403
    assert resp.json()["code"] == "forbidden"


async def test_bad_paging_is_rejected(client, headers_for):
    resp = await client.get(
        "/api/v1/milk-rates/", params={"limit": 1000}, headers=headers_for("admin")
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == "validation_error"


async def test_missing_caller_headers(client, seeded_users):
    resp = await client.get("/api/v1/milk-rates/")
    assert resp.status_code == 401
    health = await client.get("/api/v1/health")
    assert health.status_code == 200
    assert health.json() == {"status": "ok"}
