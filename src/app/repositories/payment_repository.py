from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Payment


class IPaymentRepository(ABC):
    """Payment repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, payment_id: UUID) -> Optional[Payment]:
        """Get payment by ID"""
        pass

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """Create a new payment"""
        pass

    @abstractmethod
    async def update(self, payment: Payment) -> Payment:
        """Update existing payment"""
        pass

    @abstractmethod
    async def delete(self, payment: Payment) -> None:
        """Delete a payment"""
        pass
