"""
Order Entity

A member's purchase of a premium item.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Order(SQLModel, table=True):
    """
    Order entity.

    Business Rules:
    - order_uid is the merchant order number shared with the payment gateway
    - Deleted together with its payment when the payment fails
    """

    __tablename__ = "orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    order_uid: str = Field(unique=True, index=True, max_length=64)
    item_name: str = Field(max_length=100)
    price: int = Field(nullable=False)

    member_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)
    payment_id: UUID = Field(foreign_key="payments.id", nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
