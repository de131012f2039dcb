from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.payment_repository import IPaymentRepository
from src.domain.entities import Payment


class PaymentRepository(IPaymentRepository):
    """Payment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, payment_id: UUID) -> Optional[Payment]:
        """Get payment by ID"""
        stmt = select(Payment).where(Payment.id == payment_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, payment: Payment) -> Payment:
        """Create a new payment"""
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def update(self, payment: Payment) -> Payment:
        """Update existing payment"""
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def delete(self, payment: Payment) -> None:
        """Delete a payment"""
        await self.session.delete(payment)
        await self.session.flush()
