"""Listing repository - Document store operations for listings"""

from ...capabilities import DocumentStore
from .schemas import ListingKind


class ListingRepository:
    """Repository for listing documents, one collection per ListingKind"""

    @staticmethod
    async def create_listing(store: DocumentStore, kind: ListingKind, doc: dict) -> str:
        return await store.create(kind.collection, doc)

    @staticmethod
    async def get_all(store: DocumentStore, kind: ListingKind) -> list[dict]:
        return await store.list(kind.collection)

    @staticmethod
    async def get_by_merchant(store: DocumentStore, kind: ListingKind, merchant_id: str) -> list[dict]:
        return await store.query(kind.collection, "merchantId", merchant_id)

    @staticmethod
    async def update_listing(store: DocumentStore, kind: ListingKind, listing_id: str, patch: dict) -> None:
        await store.update(kind.collection, listing_id, patch)

    @staticmethod
    async def delete_listing(store: DocumentStore, kind: ListingKind, listing_id: str) -> None:
        await store.delete(kind.collection, listing_id)
