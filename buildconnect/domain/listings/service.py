"""Listing service - Merchant catalog operations"""

import asyncio
import logging
import math
from typing import Any, Union

from fastapi import HTTPException

from ...capabilities import DocumentStore
from .repository import ListingRepository
from .schemas import ListingCreate, ListingKind

logger = logging.getLogger(__name__)


def parse_price(value: Any) -> Union[int, float]:
    """Coerce a number or numeric string to a number, keeping whole values as int"""
    if isinstance(value, bool):
        raise ValueError("Boolean is not a price")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Price must be finite: {value}")
    return int(number) if number.is_integer() else number


class ListingService:
    """Service layer for listing business logic"""

    def __init__(self, store: DocumentStore):
        self.store = store
        self.repo = ListingRepository()

    @staticmethod
    def _resolve_collection(collection_name: str) -> ListingKind:
        kind = ListingKind.from_collection(collection_name)
        if kind is None:
            logger.warning(f"⚠️ Rejected listing operation on collection '{collection_name}'")
            raise HTTPException(status_code=400, detail="Invalid collection specified.")
        return kind

    async def create_listing(self, data: ListingCreate) -> str:
        """Create a listing in the collection matching its listingType"""
        if not data.listingType or not data.name or not data.price or not data.merchantId:
            raise HTTPException(status_code=400, detail="Missing required fields.")

        kind = ListingKind.from_listing_type(data.listingType)
        if kind is None:
            raise HTTPException(status_code=400, detail="Invalid listing type.")

        try:
            price = parse_price(data.price)
        except (TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail="Invalid price.") from e

        try:
            listing_id = await self.repo.create_listing(self.store, kind, kind.build_document(data, price))
        except Exception as e:
            logger.error(f"❌ Error creating listing: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to create listing.") from e

        logger.info(f"✅ {data.listingType} listing {listing_id} created by merchant {data.merchantId}")
        return listing_id

    async def update_listing(self, collection_name: str, listing_id: str, patch: dict) -> dict:
        """Apply an arbitrary patch to a listing"""
        kind = self._resolve_collection(collection_name)
        try:
            await self.repo.update_listing(self.store, kind, listing_id, patch)
        except Exception as e:
            logger.error(f"❌ Error updating listing {kind.collection}/{listing_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to update listing.") from e
        return {"message": "Listing updated successfully!"}

    async def delete_listing(self, collection_name: str, listing_id: str) -> dict:
        """Remove a listing"""
        kind = self._resolve_collection(collection_name)
        try:
            await self.repo.delete_listing(self.store, kind, listing_id)
        except Exception as e:
            logger.error(f"❌ Error removing listing {kind.collection}/{listing_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to remove listing.") from e
        return {"message": "Listing removed successfully!"}

    async def get_merchant_listings(self, merchant_id: str) -> list[dict]:
        """All listings of a merchant across kinds, each tagged with its collection"""
        kinds = list(ListingKind)
        try:
            results = await asyncio.gather(
                *(self.repo.get_by_merchant(self.store, kind, merchant_id) for kind in kinds)
            )
        except Exception as e:
            logger.error(f"❌ Error fetching listings for merchant {merchant_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Failed to fetch listings.") from e

        return [
            {"id": doc["id"], "collection": kind.collection, **doc}
            for kind, docs in zip(kinds, results)
            for doc in docs
        ]

    async def get_all_listings(self, kind: ListingKind) -> list[dict]:
        """Every listing of one kind, unordered"""
        try:
            return await self.repo.get_all(self.store, kind)
        except Exception as e:
            logger.error(f"❌ Error fetching {kind.collection}: {str(e)}")
            raise HTTPException(status_code=500, detail="Something went wrong") from e
