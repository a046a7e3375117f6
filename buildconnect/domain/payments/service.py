"""Payment service - Razorpay order creation for checkout"""

import logging
import math
import time
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from fastapi import HTTPException

from ...capabilities import PaymentGateway
from ...config import PAYMENT_CURRENCY
from ...services.razorpay_service import PaymentGatewayError

logger = logging.getLogger(__name__)


def is_valid_amount(amount: Any) -> bool:
    """A finite JSON number of at least 1"""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    if isinstance(amount, int):
        return amount >= 1
    return math.isfinite(amount) and amount >= 1


def to_minor_units(amount: float) -> int:
    """
    Convert major units to minor units (rupees to paise).

    Rounds half-up on the decimal representation of the amount, so 10.005
    becomes 1001 instead of the 1000 that float multiplication would give.
    """
    if isinstance(amount, int):
        return amount * 100
    return int(Decimal(str(amount)).scaleb(2).to_integral_value(rounding=ROUND_HALF_UP))


def generate_receipt_id() -> str:
    return f"receipt_order_{int(time.time() * 1000)}"


class PaymentService:
    """Service layer for payment orders"""

    def __init__(self, gateway: PaymentGateway, currency: str = PAYMENT_CURRENCY):
        self.gateway = gateway
        self.currency = currency

    async def create_order(self, amount: Any) -> dict:
        """
        Create a payment order for the given amount.

        Raises:
            HTTPException: 400 for an invalid amount, 500 when no order came back
            PaymentGatewayError: the gateway rejected the order
        """
        logger.info(f"📥 Payment order requested for amount {amount!r} ({type(amount).__name__})")

        if not is_valid_amount(amount):
            logger.error(f"❌ Invalid amount received for payment: {amount!r}")
            raise HTTPException(status_code=400, detail="Invalid amount for payment.")

        amount_minor = to_minor_units(amount)
        receipt = generate_receipt_id()
        logger.info(f"Creating order: amount={amount_minor} currency={self.currency} receipt={receipt}")

        try:
            order = await self.gateway.create_order(amount_minor, self.currency, receipt)
        except PaymentGatewayError:
            raise
        except Exception as e:
            logger.error(f"❌ Unexpected error creating payment order: {e}")
            raise HTTPException(
                status_code=500, detail="An unexpected error occurred on the server."
            ) from e

        if not order:
            logger.error("❌ Order creation returned an empty response")
            raise HTTPException(status_code=500, detail="Error creating order")

        return order
