from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Order


class IOrderRepository(ABC):
    """Order repository interface - application layer"""

    @abstractmethod
    async def get_by_order_uid(self, order_uid: str) -> Optional[Order]:
        """Get order by merchant order number"""
        pass

    @abstractmethod
    async def create(self, order: Order) -> Order:
        """Create a new order"""
        pass

    @abstractmethod
    async def delete(self, order: Order) -> None:
        """Delete an order"""
        pass
