from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.delivery_session import DeliverySession, pick_session
from src.domain.value_objects.milk_type import MilkType


class MilkRateCreate(BaseModel):
    milk_type: MilkType
    delivery_session: DeliverySession | None = None
    # Backward-compatible alias accepted from mobile/web payloads.
    shift: DeliverySession | None = None
    applies_to_all_sessions: bool = False
    price_per_unit: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    effective_from: DtDate
    is_active: bool | None = None

    def resolved_session(self) -> DeliverySession | None:
        if self.applies_to_all_sessions:
            return None
        return pick_session(self.delivery_session, self.shift) or DeliverySession.MORNING


class MilkRateUpdate(BaseModel):
    milk_type: MilkType | None = None
    delivery_session: DeliverySession | None = None
    shift: DeliverySession | None = None
    applies_to_all_sessions: bool | None = None
    price_per_unit: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    effective_from: DtDate | None = None
    is_active: bool | None = None


class MilkRateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    milk_type: MilkType
    delivery_session: DeliverySession | None
    price_per_unit: Decimal
    effective_from: DtDate
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ResolvedRateResponse(BaseModel):
    rate_id: UUID
    milk_type: MilkType
    delivery_session: DeliverySession
    date: DtDate
    price_per_unit: Decimal
