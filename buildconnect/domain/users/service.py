"""User service - registration"""

import logging

from fastapi import HTTPException

from ...capabilities import DocumentStore, IdentityProvider
from .repository import UserRepository
from .schemas import UserRegister

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user accounts"""

    def __init__(self, store: DocumentStore, identity: IdentityProvider):
        self.store = store
        self.identity = identity
        self.repo = UserRepository()

    async def register(self, data: UserRegister) -> str:
        """
        Create the sign-in account, then the profile document keyed by its uid.

        The account is not deleted if the profile write fails.
        TODO: delete the orphaned account when create_profile raises once the
        product owners confirm a half-registered user should not be kept.
        """
        logger.info(f"📥 Registering {data.role} account for {data.email}")

        try:
            uid = await self.identity.create_account(data.email, data.password, data.name)
        except Exception as e:
            logger.error(f"❌ Account creation failed for {data.email}: {str(e)}")
            raise HTTPException(status_code=400, detail=str(e)) from e

        try:
            await self.repo.create_profile(
                self.store, uid, name=data.name, email=data.email, role=data.role
            )
        except Exception as e:
            logger.error(f"❌ Account {uid} created but profile write failed: {str(e)}")
            raise HTTPException(status_code=400, detail=str(e)) from e

        logger.info(f"✅ User {uid} registered")
        return uid
