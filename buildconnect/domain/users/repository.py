"""User repository - profile documents keyed by account uid"""

from ...capabilities import DocumentStore
from ...collection_names import COLLECTION_USERS


class UserRepository:
    """Repository for user profile documents"""

    @staticmethod
    async def create_profile(store: DocumentStore, uid: str, **profile) -> None:
        await store.set(COLLECTION_USERS, uid, profile)
