"""Booking service - Order placement, confirmation email and cancellation"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import HTTPException

from ...capabilities import DocumentStore, EmailSender, IdentityProvider
from ...email_service import compile_mjml_to_html
from ...email_templates import booking_confirmation_template
from .repository import BookingRepository
from .schemas import BookingCreate, BookingStatus

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision and a Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _booking_date_key(booking: dict) -> datetime:
    value = booking.get("bookingDate")
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return datetime.min.replace(tzinfo=timezone.utc)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_missing(value: Any) -> bool:
    """Absent, empty or zero scalars are missing; any object or list counts as present"""
    if isinstance(value, (dict, list)):
        return False
    return not value


class BookingService:
    """Service layer for booking workflows"""

    def __init__(self, store: DocumentStore, identity: IdentityProvider, email_sender: EmailSender):
        self.store = store
        self.identity = identity
        self.email_sender = email_sender
        self.repo = BookingRepository()

    async def create_booking(self, data: BookingCreate) -> str:
        """Validate and persist a confirmed booking, returning its id"""
        if not data.userId or not data.cartItems or _is_missing(data.siteLocation):
            logger.warning(f"⚠️ Rejected booking with missing information for user {data.userId}")
            raise HTTPException(status_code=400, detail="Missing booking information.")

        logger.info(f"📥 Creating booking for user {data.userId} ({len(data.cartItems)} items)")

        try:
            booking_id = await self.repo.create_booking(
                self.store,
                clientId=data.userId,
                items=data.cartItems,
                totalAmount=data.totalPrice,
                status=BookingStatus.CONFIRMED.value,
                bookingDate=utc_timestamp(),
                paymentDetails=data.paymentDetails or {},
                siteLocation=data.siteLocation,
            )
        except Exception as e:
            logger.error(f"❌ Error creating booking: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to create booking.") from e

        logger.info(f"✅ Booking {booking_id} created for user {data.userId}")
        return booking_id

    async def send_booking_confirmation(self, booking_id: str, data: BookingCreate) -> bool:
        """
        Email the booking summary to the client.

        Runs after the booking is stored. Failures are logged and reported
        through the return value only; the booking itself is never affected.
        """
        try:
            account = await self.identity.lookup_account(data.userId)
            user_email = account.get("email")
            if not user_email:
                raise ValueError(f"No email address on account {data.userId}")

            mjml_content = booking_confirmation_template(
                items=data.cartItems or [],
                total_amount=data.totalPrice,
                site_location=data.siteLocation,
            )
            await self.email_sender.send(
                to=user_email,
                subject=f"Your BuildConnect Booking Confirmation (#{booking_id[:8]})",
                html_content=compile_mjml_to_html(mjml_content),
            )
            logger.info(f"📧 Confirmation email sent to: {user_email}")
            return True
        except Exception as e:
            logger.error(f"❌ Failed to send confirmation email for booking {booking_id}: {e}")
            return False

    async def get_user_bookings(self, user_id: str) -> list[dict]:
        """Bookings placed by a user, newest first"""
        try:
            bookings = await self.repo.get_bookings_for_client(self.store, user_id)
        except Exception as e:
            logger.error(f"❌ Error fetching user bookings: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to fetch bookings.") from e

        return sorted(bookings, key=_booking_date_key, reverse=True)

    async def cancel_booking(self, booking_id: str) -> dict:
        """Mark a booking as cancelled (idempotent, no existence check)"""
        try:
            await self.repo.update_status(self.store, booking_id, BookingStatus.CANCELLED.value)
        except Exception as e:
            logger.error(f"❌ Error cancelling booking {booking_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to cancel booking.") from e

        logger.info(f"Booking {booking_id} cancelled")
        return {"message": "Booking cancelled successfully!"}
