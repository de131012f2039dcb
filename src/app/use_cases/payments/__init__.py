"""
Payment Use Cases

Gateway webhook and checkout callback handling.
"""

from .dtos import PaymentRequestResponse, PaymentResultResponse
from .get_payment_request_use_case import GetPaymentRequestUseCase
from .payment_callback_use_case import PaymentCallbackUseCase
from .process_webhook_use_case import ProcessWebhookUseCase

__all__ = [
    "GetPaymentRequestUseCase",
    "PaymentRequestResponse",
    "ProcessWebhookUseCase",
    "PaymentCallbackUseCase",
    "PaymentResultResponse",
]
