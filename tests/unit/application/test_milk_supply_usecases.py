from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import InvalidQuantity, NotFound, PermissionDenied, ValidationError
from src.application.use_cases.milk_supply import list_supply, record_supply, sellers_summary
from src.domain.models.user import User
from src.domain.value_objects.caller import CallerContext
from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.role import Role


class StubUsersRepo:
    def __init__(self, users: list[User]) -> None:
        self.users = {u.id: u for u in users}

    async def get(self, user_id):
        return self.users.get(user_id)


class StubSupplyRepo:
    def __init__(self) -> None:
        self.items: list = []
        self.last_list: dict | None = None
        self.last_summary: dict | None = None

    async def add(self, supply):
        self.items.append(supply)
        return supply

    async def list(self, **kwargs):
        self.last_list = kwargs
        return list(self.items)

    async def summary_by_seller(self, **kwargs):
        self.last_summary = kwargs
        return []


def make_uow(users):
    state = {"commits": 0}

    async def commit():
        state["commits"] += 1

    return SimpleNamespace(
        users=StubUsersRepo(users),
        milk_supply=StubSupplyRepo(),
        commit=commit,
        state=state,
    )


@pytest.fixture()
def seller():
    return User.create(name="Ramesh", mobile="9000000002", role=Role.SELLER)


async def test_seller_records_supply_with_defaults(seller):
    uow = make_uow([seller])
    supply = await record_supply.execute(
        uow,
        CallerContext(role=Role.SELLER, user_id=seller.id),
        seller.id,
        record_supply.RecordSupplyInput(date=date(2024, 3, 5), quantity=Decimal("12.5")),
    )
    assert supply.unit == "L"
    assert supply.delivery_session is DeliverySession.MORNING
    assert supply.milk_type is MilkType.COW
    assert uow.milk_supply.items == [supply]
    assert uow.state["commits"] == 1


async def test_supply_needs_positive_quantity_and_known_seller(seller):
    admin = CallerContext(role=Role.ADMIN)
    with pytest.raises(InvalidQuantity):
        await record_supply.execute(
            make_uow([seller]),
            admin,
            seller.id,
            record_supply.RecordSupplyInput(date=date(2024, 3, 5), quantity=Decimal("0")),
        )
    with pytest.raises(NotFound, match="Seller not found"):
        await record_supply.execute(
            make_uow([]),
            admin,
            seller.id,
            record_supply.RecordSupplyInput(date=date(2024, 3, 5), quantity=Decimal("1")),
        )


async def test_supply_record_permissions(seller):
    uow = make_uow([seller])
    payload = record_supply.RecordSupplyInput(date=date(2024, 3, 5), quantity=Decimal("1"))
    with pytest.raises(PermissionDenied):
        await record_supply.execute(
            uow, CallerContext(role=Role.BUYER, user_id=uuid4()), seller.id, payload
        )
    with pytest.raises(PermissionDenied):
        await record_supply.execute(
            uow, CallerContext(role=Role.SELLER, user_id=uuid4()), seller.id, payload
        )
    assert uow.milk_supply.items == []


async def test_seller_listing_is_scoped_to_self(seller):
    uow = make_uow([seller])
    caller = CallerContext(role=Role.SELLER, user_id=seller.id)
    await list_supply.execute(uow, caller, list_supply.ListSupplyQuery())
    assert uow.milk_supply.last_list["seller_id"] == seller.id
    assert uow.milk_supply.last_list["limit"] is None

    with pytest.raises(PermissionDenied):
        await list_supply.execute(uow, caller, list_supply.ListSupplyQuery(seller_id=uuid4()))


async def test_listing_pages_only_when_asked(seller):
    uow = make_uow([seller])
    admin = CallerContext(role=Role.ADMIN)
    await list_supply.execute(uow, admin, list_supply.ListSupplyQuery(page=3))
    assert uow.milk_supply.last_list["offset"] == 100
    assert uow.milk_supply.last_list["limit"] == 50
    assert uow.milk_supply.last_list["seller_id"] is None

    with pytest.raises(ValidationError):
        await list_supply.execute(uow, admin, list_supply.ListSupplyQuery(limit=501))
    with pytest.raises(ValidationError):
        await list_supply.execute(
            uow,
            admin,
            list_supply.ListSupplyQuery(date_from=date(2024, 3, 2), date_to=date(2024, 3, 1)),
        )


async def test_summary_is_admin_only(seller):
    uow = make_uow([seller])
    with pytest.raises(PermissionDenied):
        await sellers_summary.execute(uow, CallerContext(role=Role.SELLER, user_id=seller.id))
    await sellers_summary.execute(
        uow, CallerContext(role=Role.ADMIN), date_from=date(2024, 3, 1)
    )
    assert uow.milk_supply.last_summary == {"date_from": date(2024, 3, 1), "date_to": None}
