"""
Get Payment Request Use Case

Supplies the checkout page with what it needs to open the gateway widget.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork

from .dtos import PaymentRequestResponse


class GetPaymentRequestUseCase:
    """
    Use case for reading an order's checkout details.

    Business Rules:
    - Order must exist
    - Price comes from the order's payment, buyer details from its member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, order_uid: str) -> Result[PaymentRequestResponse]:
        async with self.uow:
            order = await self.uow.orders.get_by_order_uid(order_uid)
            if order is None:
                return Return.err(Error("ORDER_NOT_FOUND", "Order not found"))

            payment = await self.uow.payments.get_by_id(order.payment_id)
            buyer = await self.uow.members.get_by_id(order.member_id)
            if payment is None or buyer is None:
                return Return.err(Error("ORDER_NOT_FOUND", "Order not found"))

            return Return.ok(
                PaymentRequestResponse(
                    buyer_name=buyer.name,
                    buyer_email=buyer.email,
                    payment_price=payment.price,
                    item_name=order.item_name,
                    order_uid=order.order_uid,
                )
            )
