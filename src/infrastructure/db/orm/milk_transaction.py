from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, Date, DateTime, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.value_objects.delivery_session import DeliverySession
from src.domain.value_objects.milk_type import MilkType
from src.domain.value_objects.transaction_status import TransactionStatus
from src.infrastructure.db.base import Base, enum_type


class MilkTransactionORM(Base):
    __tablename__ = "milk_transactions"
    __table_args__ = (
        Index("ix_milk_transactions_seller_buyer_date", "seller_id", "buyer_id", "date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    seller_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    buyer_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    quantity: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    unit: Mapped[str] = mapped_column(String(10), nullable=False, default="L")
    status: Mapped[TransactionStatus] = mapped_column(
        enum_type(TransactionStatus, "transaction_status"),
        nullable=False,
        default=TransactionStatus.DELIVERED,
    )
    delivery_session: Mapped[DeliverySession] = mapped_column(
        enum_type(DeliverySession, "delivery_session"),
        nullable=False,
        default=DeliverySession.MORNING,
    )
    milk_type: Mapped[MilkType] = mapped_column(
        enum_type(MilkType, "milk_type"), nullable=False, default=MilkType.COW
    )
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_per_unit: Mapped[Decimal | None] = mapped_column(DECIMAL(10, 2), nullable=True)
    total_amount: Mapped[Decimal | None] = mapped_column(DECIMAL(12, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
