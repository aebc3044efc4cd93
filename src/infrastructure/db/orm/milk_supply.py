from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Date, DateTime, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.infrastructure.db.base import Base, enum_type


class MilkSupplyORM(Base):
    __tablename__ = "milk_supply"
    __table_args__ = (Index("ix_milk_supply_seller_date", "seller_id", "date"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    seller_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)
    quantity: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    unit: Mapped[str] = mapped_column(String(10), nullable=False, default="L")
    delivery_session: Mapped[DeliverySession] = mapped_column(
        enum_type(DeliverySession, "delivery_session"),
        nullable=False,
        default=DeliverySession.MORNING,
    )
    milk_type: Mapped[MilkType] = mapped_column(
        enum_type(MilkType, "milk_type"), nullable=False, default=MilkType.COW
    )
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
