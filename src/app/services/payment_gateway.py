from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class GatewayPayment(BaseModel):
    """Payment as reported by the payment gateway"""

    payment_uid: str
    status: str
    amount: int
    fail_reason: Optional[str] = None


class PaymentGatewayError(Exception):
    """Raised when the payment gateway cannot be reached or answers with an error"""


class IPaymentGateway(ABC):
    """Payment gateway port - application layer"""

    @abstractmethod
    async def get_payment(self, payment_uid: str) -> GatewayPayment:
        """Look up a single payment by gateway transaction id"""
        pass

    @abstractmethod
    async def cancel_payment(self, payment_uid: str, amount: int) -> None:
        """Cancel (refund) a payment"""
        pass
