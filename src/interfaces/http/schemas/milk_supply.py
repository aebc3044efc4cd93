from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.delivery_session import DeliverySession, pick_session
from src.domain.value_objects.milk_type import MilkType


class MilkSupplyCreate(BaseModel):
    # Admins record on behalf of a seller; sellers always record as themselves.
    seller_id: UUID | None = None
    date: DtDate
    quantity: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    unit: str | None = Field(default=None, max_length=10)
    delivery_session: DeliverySession | None = None
    shift: DeliverySession | None = None
    milk_type: MilkType | None = None
    remarks: str | None = None

    def resolved_session(self) -> DeliverySession | None:
        return pick_session(self.delivery_session, self.shift)


class MilkSupplyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    seller_id: UUID
    date: DtDate
    quantity: Decimal
    unit: str
    delivery_session: DeliverySession
    milk_type: MilkType
    remarks: str | None
    created_at: datetime
    updated_at: datetime


class SupplySummaryItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    seller_id: UUID
    seller_name: str | None
    seller_mobile: str | None
    total_entries: int
    total_quantity: Decimal
    total_liters: Decimal
    total_kg: Decimal
    morning_entries: int
    evening_entries: int
    cow_entries: int
    buffalo_entries: int
