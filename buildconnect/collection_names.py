"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written, so these constants are the single
source of truth for where each entity lives.
"""

COLLECTION_BOOKINGS = "bookings"
COLLECTION_USERS = "users"

# Listing kinds, one collection each (see domain.listings.schemas.ListingKind)
COLLECTION_EQUIPMENT = "equipment"
COLLECTION_MATERIALS = "materials"
COLLECTION_CONTRACTORS = "contractors"
