"""Booking domain schemas - Pydantic models for validation"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel


class BookingStatus(str, Enum):
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


class BookingCreate(BaseModel):
    """Schema for placing an order from the cart.

    Required fields are checked by BookingService so that a missing field
    answers with the booking-specific message instead of a field error list.
    """

    userId: Optional[str] = None
    cartItems: Optional[list[Any]] = None
    totalPrice: Optional[Union[int, float]] = None
    paymentDetails: Optional[dict[str, Any]] = None
    siteLocation: Optional[Any] = None


class BookingCreatedResponse(BaseModel):
    message: str
    bookingId: str


class MessageResponse(BaseModel):
    message: str
