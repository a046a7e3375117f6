"""Razorpay service - Integration with the Razorpay Orders API"""

import logging
from typing import Any, Optional

import httpx

from ..config import (
    RAZORPAY_API_URL,
    RAZORPAY_KEY_ID,
    RAZORPAY_KEY_SECRET,
    RAZORPAY_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class PaymentGatewayError(Exception):
    """Error returned by the payment API, carrying its HTTP status and error payload"""

    def __init__(self, status_code: int, error: Any):
        self.status_code = status_code
        self.error = error
        super().__init__(f"Payment gateway error {status_code}: {error}")


class RazorpayService:
    """Service for Razorpay API operations"""

    def __init__(
        self,
        key_id: Optional[str] = RAZORPAY_KEY_ID,
        key_secret: Optional[str] = RAZORPAY_KEY_SECRET,
        base_url: str = RAZORPAY_API_URL,
        timeout: float = RAZORPAY_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

        if not self.is_available():
            logger.warning(
                "RAZORPAY_KEY_ID / RAZORPAY_KEY_SECRET not set; payment orders will fail until configured"
            )

    def is_available(self) -> bool:
        """Check if Razorpay credentials are configured"""
        return bool(self.key_id and self.key_secret)

    async def create_order(self, amount: int, currency: str, receipt: str) -> Optional[dict]:
        """
        Create a Razorpay order.

        Args:
            amount: Amount in minor units (paise for INR)
            currency: ISO currency code
            receipt: Merchant receipt identifier

        Returns:
            The order object exactly as returned by Razorpay

        Raises:
            PaymentGatewayError: Razorpay answered with an error status
        """
        if not self.is_available():
            raise Exception("Razorpay client not configured")

        payload = {"amount": amount, "currency": currency, "receipt": receipt}

        async with httpx.AsyncClient(
            timeout=self.timeout,
            auth=(self.key_id, self.key_secret),
            transport=self.transport,
        ) as client:
            response = await client.post(f"{self.base_url}/orders", json=payload)

        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {"description": response.text}
            # Razorpay wraps failures as {"error": {...}}; surface the inner object
            error = body.get("error", body) if isinstance(body, dict) else body
            logger.error(f"❌ Razorpay order creation failed: {response.status_code} {error}")
            raise PaymentGatewayError(response.status_code, error)

        if not response.content:
            return None

        order = response.json()
        logger.info(f"✅ Razorpay order created: {order.get('id') if isinstance(order, dict) else order}")
        return order
