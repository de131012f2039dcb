"""
Payment Entity

Tracks the gateway side of an order.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from .enums import PaymentStatus


class Payment(SQLModel, table=True):
    """
    Payment entity.

    Business Rules:
    - Starts READY, becomes OK once the gateway reports the payment as paid
    - payment_uid is the gateway transaction id, known only after payment
    """

    __tablename__ = "payments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    price: int = Field(nullable=False)
    status: PaymentStatus = Field(default=PaymentStatus.READY)
    payment_uid: Optional[str] = Field(default=None, max_length=64)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    paid_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    def change_payment_by_success(self, status: PaymentStatus, payment_uid: str) -> None:
        self.status = status
        self.payment_uid = payment_uid
        self.paid_at = datetime.utcnow()
