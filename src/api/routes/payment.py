from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.payment_gateway import IPaymentGateway
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.payments import (
    GetPaymentRequestUseCase,
    PaymentCallbackUseCase,
    PaymentRequestResponse,
    PaymentResultResponse,
    ProcessWebhookUseCase,
)
from src.depends import get_current_member_id, get_payment_gateway, get_unit_of_work

router = APIRouter(prefix="/payments", tags=["Payment"])


class PaymentNotificationRequest(BaseModel):
    """
    Payment gateway notification payload

    Sent by the gateway (webhook) or by the checkout page (callback).
    """

    payment_uid: str = Field(..., description="Gateway transaction id")
    order_uid: str = Field(..., description="Merchant order number")


PAYMENT_CLIENT_ERRORS = (
    "PAYMENT_FAILED",
    "PAYMENT_NOT_COMPLETED",
    "PAYMENT_AMOUNT_MISMATCH",
)


@router.post("/webhook", status_code=status.HTTP_200_OK, response_model=PaymentResultResponse)
async def payment_webhook(
    request: PaymentNotificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: IPaymentGateway = Depends(get_payment_gateway),
):
    """
    Payment Webhook

    The status is re-read from the gateway; a paid order upgrades the buyer
    to Premium.

    Raises:
        - 400 Bad Request: PAYMENT_FAILED
        - 404 Not Found: ORDER_NOT_FOUND
        - 500 Internal Server Error: PAYMENT_GATEWAY_ERROR
    """
    use_case = ProcessWebhookUseCase(uow, gateway)
    result = await use_case.execute(request.payment_uid, request.order_uid)

    if result.is_err():
        error = result.error
        if error.code == "ORDER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in PAYMENT_CLIENT_ERRORS:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post("/callback", status_code=status.HTTP_200_OK, response_model=PaymentResultResponse)
async def payment_callback(
    request: PaymentNotificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: IPaymentGateway = Depends(get_payment_gateway),
):
    """
    Payment Callback

    Verifies the paid amount against the order before upgrading the buyer.

    Raises:
        - 400 Bad Request: PAYMENT_NOT_COMPLETED, PAYMENT_AMOUNT_MISMATCH
        - 404 Not Found: ORDER_NOT_FOUND
        - 500 Internal Server Error: PAYMENT_GATEWAY_ERROR
    """
    use_case = PaymentCallbackUseCase(uow, gateway)
    result = await use_case.execute(request.payment_uid, request.order_uid)

    if result.is_err():
        error = result.error
        if error.code == "ORDER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in PAYMENT_CLIENT_ERRORS:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get(
    "/orders/{order_uid}",
    status_code=status.HTTP_200_OK,
    response_model=PaymentRequestResponse,
)
async def get_payment_request(
    order_uid: str,
    member_id: UUID = Depends(get_current_member_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Payment Request

    Checkout details (buyer, price, item) for opening the gateway payment page.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: ORDER_NOT_FOUND
    """
    use_case = GetPaymentRequestUseCase(uow)
    result = await use_case.execute(order_uid)

    if result.is_err():
        error = result.error
        if error.code == "ORDER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
