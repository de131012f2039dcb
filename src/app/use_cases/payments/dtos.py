"""
Payment Use Case DTOs (Data Transfer Objects)
"""

from pydantic import BaseModel


class PaymentResultResponse(BaseModel):
    """Response for webhook and callback use cases"""

    order_uid: str
    payment_uid: str
    status: str
    grade: str


class PaymentRequestResponse(BaseModel):
    """Checkout details handed to the payment page for an order"""

    buyer_name: str
    buyer_email: str
    payment_price: int
    item_name: str
    order_uid: str
