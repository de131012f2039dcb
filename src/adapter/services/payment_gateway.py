"""
HTTP payment gateway client.

Speaks the Iamport-style REST API: every call is authorized with a short
lived token from /users/getToken, and every response is wrapped as
{"code": 0, "message": ..., "response": {...}} where a non-zero code is an error.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from src.app.services.payment_gateway import (
    GatewayPayment,
    IPaymentGateway,
    PaymentGatewayError,
)

logger = logging.getLogger(__name__)


class HttpPaymentGateway(IPaymentGateway):
    """IPaymentGateway implementation over httpx"""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    @staticmethod
    def _unwrap(response: httpx.Response) -> Dict[str, Any]:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PaymentGatewayError(
                f"Gateway responded {response.status_code}"
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise PaymentGatewayError("Gateway responded with a non-JSON body") from e

        if not isinstance(body, dict):
            raise PaymentGatewayError("Gateway responded with an unexpected body")
        if body.get("code") != 0:
            raise PaymentGatewayError(body.get("message") or "Gateway error")

        data = body.get("response")
        if not isinstance(data, dict):
            raise PaymentGatewayError("Gateway response is missing")
        return data

    async def _access_token(self, client: httpx.AsyncClient) -> str:
        response = await client.post(
            "/users/getToken",
            json={"imp_key": self.api_key, "imp_secret": self.api_secret},
        )
        token = self._unwrap(response).get("access_token")
        if not token:
            raise PaymentGatewayError("Gateway did not issue an access token")
        return token

    async def get_payment(self, payment_uid: str) -> GatewayPayment:
        """Look up a single payment by gateway transaction id"""
        try:
            async with self._client() as client:
                token = await self._access_token(client)
                response = await client.get(
                    f"/payments/{payment_uid}", headers={"Authorization": token}
                )
                data = self._unwrap(response)
        except httpx.HTTPError as e:
            logger.error(f"Payment lookup failed for {payment_uid}: {e}")
            raise PaymentGatewayError("Payment gateway unreachable") from e

        try:
            return GatewayPayment(
                payment_uid=data.get("imp_uid", payment_uid),
                status=data.get("status", ""),
                amount=int(data.get("amount", 0)),
                fail_reason=data.get("fail_reason"),
            )
        except (TypeError, ValueError) as e:
            raise PaymentGatewayError(f"Malformed payment {payment_uid}") from e

    async def cancel_payment(self, payment_uid: str, amount: int) -> None:
        """Cancel (refund) a payment, checksum guards against double refunds"""
        try:
            async with self._client() as client:
                token = await self._access_token(client)
                response = await client.post(
                    "/payments/cancel",
                    headers={"Authorization": token},
                    json={"imp_uid": payment_uid, "amount": amount, "checksum": amount},
                )
                self._unwrap(response)
        except httpx.HTTPError as e:
            logger.error(f"Payment cancel failed for {payment_uid}: {e}")
            raise PaymentGatewayError("Payment gateway unreachable") from e

        logger.info(f"Cancelled payment {payment_uid} ({amount})")
