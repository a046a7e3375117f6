"""Payment domain schemas"""

from typing import Any

from pydantic import BaseModel


class OrderCreate(BaseModel):
    """Checkout amount in major currency units.

    Left untyped so that strings and booleans reach PaymentService and are
    rejected there instead of being coerced to numbers.
    """

    amount: Any = None
