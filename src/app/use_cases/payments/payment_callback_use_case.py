"""
Payment Callback Use Case

Handles the client-side redirect after checkout, verifying the paid amount.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.payment_gateway import IPaymentGateway, PaymentGatewayError
from src.app.services.unit_of_work import UnitOfWork

from .dtos import PaymentResultResponse
from .process_webhook_use_case import PAID, complete_order, discard_order

logger = logging.getLogger(__name__)


class PaymentCallbackUseCase:
    """
    Use case for the payment callback.

    Business Rules:
    - Not paid: order and payment are deleted
    - Paid amount differs from the stored price: the gateway payment is
      cancelled, order and payment are deleted
    - Otherwise payment becomes OK and the buyer is upgraded to Premium
    """

    def __init__(self, uow: UnitOfWork, gateway: IPaymentGateway):
        self.uow = uow
        self.gateway = gateway

    async def execute(self, payment_uid: str, order_uid: str) -> Result[PaymentResultResponse]:
        try:
            gateway_payment = await self.gateway.get_payment(payment_uid)
        except PaymentGatewayError as e:
            logger.error(f"Gateway lookup failed for {payment_uid}: {e}")
            return Return.err(Error("PAYMENT_GATEWAY_ERROR", str(e)))

        async with self.uow:
            order = await self.uow.orders.get_by_order_uid(order_uid)
            if order is None:
                return Return.err(Error("ORDER_NOT_FOUND", "Order not found"))

            if gateway_payment.status != PAID:
                await discard_order(self.uow, order)
                await self.uow.commit()
                return Return.err(
                    Error("PAYMENT_NOT_COMPLETED", "Payment was not completed")
                )

            if gateway_payment.amount != order.price:
                logger.warning(
                    f"Amount mismatch for order {order_uid}: "
                    f"paid {gateway_payment.amount}, expected {order.price}"
                )
                try:
                    await self.gateway.cancel_payment(
                        gateway_payment.payment_uid, gateway_payment.amount
                    )
                except PaymentGatewayError as e:
                    return Return.err(Error("PAYMENT_GATEWAY_ERROR", str(e)))

                await discard_order(self.uow, order)
                await self.uow.commit()
                return Return.err(
                    Error(
                        "PAYMENT_AMOUNT_MISMATCH",
                        "Paid amount does not match the order price",
                    )
                )

            response = await complete_order(self.uow, order, gateway_payment.payment_uid)
            await self.uow.commit()

            return Return.ok(response)
