"""Booking router - FastAPI endpoints for booking operations"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, status

from ...capabilities import (
    DocumentStore,
    EmailSender,
    IdentityProvider,
    get_document_store,
    get_email_sender,
    get_identity_provider,
)
from .schemas import BookingCreate, BookingCreatedResponse, MessageResponse
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Bookings"])


def get_booking_service(
    store: DocumentStore = Depends(get_document_store),
    identity: IdentityProvider = Depends(get_identity_provider),
    email_sender: EmailSender = Depends(get_email_sender),
) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(store, identity, email_sender)


@router.post(
    "/create-booking",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    data: BookingCreate,
    background_tasks: BackgroundTasks,
    service: BookingService = Depends(get_booking_service),
):
    """Place a confirmed booking; the confirmation email is sent after the response"""
    booking_id = await service.create_booking(data)
    background_tasks.add_task(service.send_booking_confirmation, booking_id, data)
    return BookingCreatedResponse(message="Booking created successfully!", bookingId=booking_id)


@router.get("/my-bookings/{user_id}")
async def get_my_bookings(
    user_id: str,
    service: BookingService = Depends(get_booking_service),
) -> list[dict]:
    """Get all bookings of a user, newest first"""
    return await service.get_user_bookings(user_id)


@router.put("/bookings/{booking_id}/cancel", response_model=MessageResponse)
async def cancel_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
):
    """Cancel a booking"""
    return await service.cancel_booking(booking_id)
