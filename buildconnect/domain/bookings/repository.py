"""Booking repository - Document store operations for bookings"""

from ...capabilities import DocumentStore
from ...collection_names import COLLECTION_BOOKINGS


class BookingRepository:
    """Repository for booking documents"""

    @staticmethod
    async def create_booking(store: DocumentStore, **booking_data) -> str:
        """Create a booking document and return its generated id"""
        return await store.create(COLLECTION_BOOKINGS, booking_data)

    @staticmethod
    async def get_bookings_for_client(store: DocumentStore, client_id: str) -> list[dict]:
        """Get all bookings placed by a client (unordered)"""
        return await store.query(COLLECTION_BOOKINGS, "clientId", client_id)

    @staticmethod
    async def update_status(store: DocumentStore, booking_id: str, status: str) -> None:
        """Overwrite the booking status without reading it first"""
        await store.update(COLLECTION_BOOKINGS, booking_id, {"status": status})
