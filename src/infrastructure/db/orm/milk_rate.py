from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Boolean, Date, DateTime, Index, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.infrastructure.db.base import Base, enum_type


class MilkRateORM(Base):
    __tablename__ = "milk_rates"
    # session_key mirrors delivery_session with 'any' for NULL so the
    # unique constraint also covers rates that apply to every session.
    __table_args__ = (
        UniqueConstraint(
            "milk_type", "session_key", "effective_from", name="ux_milk_rates_type_session_from"
        ),
        Index("ix_milk_rates_type_from", "milk_type", "effective_from"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    milk_type: Mapped[MilkType] = mapped_column(enum_type(MilkType, "milk_type"), nullable=False)
    delivery_session: Mapped[DeliverySession | None] = mapped_column(
        enum_type(DeliverySession, "delivery_session"), nullable=True
    )
    session_key: Mapped[str] = mapped_column(String(16), nullable=False)
    price_per_unit: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    effective_from: Mapped[date] = mapped_column(Date, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
