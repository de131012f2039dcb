from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.order_repository import IOrderRepository
from src.domain.entities import Order


class OrderRepository(IOrderRepository):
    """Order repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_order_uid(self, order_uid: str) -> Optional[Order]:
        """Get order by merchant order number"""
        stmt = select(Order).where(Order.order_uid == order_uid)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, order: Order) -> Order:
        """Create a new order"""
        self.session.add(order)
        await self.session.flush()
        await self.session.refresh(order)
        return order

    async def delete(self, order: Order) -> None:
        """Delete an order"""
        await self.session.delete(order)
        await self.session.flush()
