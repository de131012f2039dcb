"""
Process Payment Webhook Use Case

Handles the gateway's server-to-server notification for an order.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.payment_gateway import IPaymentGateway, PaymentGatewayError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Order, PaymentStatus

from .dtos import PaymentResultResponse

logger = logging.getLogger(__name__)

PAID = "paid"


class ProcessWebhookUseCase:
    """
    Use case for the payment gateway webhook.

    Business Rules:
    - The payment status is always read back from the gateway, never trusted
      from the notification body
    - paid: payment becomes OK and the buyer is upgraded to Premium
    - anything else: order and payment are deleted and the call fails
    """

    def __init__(self, uow: UnitOfWork, gateway: IPaymentGateway):
        self.uow = uow
        self.gateway = gateway

    async def execute(self, payment_uid: str, order_uid: str) -> Result[PaymentResultResponse]:
        """
        Execute process webhook use case.

        Args:
            payment_uid: Gateway transaction id
            order_uid: Merchant order number

        Returns:
            Result with PaymentResultResponse DTO, or Error
        """
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
                logger.warning(f"Payment failed for order {order_uid}: {gateway_payment.fail_reason}")
                return Return.err(
                    Error(
                        "PAYMENT_FAILED",
                        f"Payment failed: {gateway_payment.fail_reason or gateway_payment.status}",
                    )
                )

            response = await complete_order(self.uow, order, gateway_payment.payment_uid)
            await self.uow.commit()

            return Return.ok(response)


async def discard_order(uow: UnitOfWork, order: Order) -> None:
    payment = await uow.payments.get_by_id(order.payment_id)
    await uow.orders.delete(order)
    if payment is not None:
        await uow.payments.delete(payment)


async def complete_order(uow: UnitOfWork, order: Order, payment_uid: str) -> PaymentResultResponse:
    payment = await uow.payments.get_by_id(order.payment_id)
    payment.change_payment_by_success(PaymentStatus.OK, payment_uid)
    await uow.payments.update(payment)

    member = await uow.members.get_by_id(order.member_id)
    member.premium()
    await uow.members.update(member)

    logger.info(f"Member {member.id} upgraded to {member.grade.value} by order {order.order_uid}")

    return PaymentResultResponse(
        order_uid=order.order_uid,
        payment_uid=payment_uid,
        status=payment.status.value,
        grade=member.grade.value,
    )
