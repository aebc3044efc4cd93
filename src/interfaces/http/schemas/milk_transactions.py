from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.delivery_session import DeliverySession, pick_session
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.transaction_status import TransactionStatus


class MilkTransactionCreate(BaseModel):
    buyer_id: UUID
    # Admins record on behalf of a seller; sellers always record as themselves.
    seller_id: UUID | None = None
    date: DtDate
    quantity: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    unit: str | None = Field(default=None, max_length=10)
    status: TransactionStatus | None = None
    delivery_session: DeliverySession | None = None
    shift: DeliverySession | None = None
    milk_type: MilkType | None = None
    remarks: str | None = None

    def resolved_session(self) -> DeliverySession | None:
        return pick_session(self.delivery_session, self.shift)


class MilkTransactionUpdate(BaseModel):
    quantity: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    unit: str | None = Field(default=None, max_length=10)
    status: TransactionStatus | None = None
    delivery_session: DeliverySession | None = None
    shift: DeliverySession | None = None
    milk_type: MilkType | None = None
    date: DtDate | None = None
    remarks: str | None = None

    def resolved_session(self) -> DeliverySession | None:
        return pick_session(self.delivery_session, self.shift)


class MilkTransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    seller_id: UUID
    buyer_id: UUID
    date: DtDate
    quantity: Decimal
    unit: str
    status: TransactionStatus
    delivery_session: DeliverySession
    milk_type: MilkType
    remarks: str | None
    price_per_unit: Decimal | None
    total_amount: Decimal | None
    created_at: datetime
    updated_at: datetime


class DeliveryStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    total_transactions: int
    total_quantity: Decimal
    total_liters: Decimal
    total_kg: Decimal
    total_amount: Decimal
    delivered_count: int
    transactions: list[MilkTransactionResponse]


class SellerStatsItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    seller_id: UUID
    seller_name: str | None
    seller_mobile: str | None
    total_transactions: int
    total_quantity: Decimal
    total_liters: Decimal
    total_kg: Decimal
    total_amount: Decimal
    delivered_count: int
