"""Firebase Authentication accounts"""

import asyncio
import logging
from typing import Optional

import firebase_admin
from firebase_admin import auth as firebase_auth

logger = logging.getLogger(__name__)


class FirebaseIdentityProvider:
    """Wraps the blocking firebase_admin.auth calls in worker threads"""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self.app = app

    async def create_account(self, email: str, password: str, display_name: str) -> str:
        """Create an email/password account and return its uid"""
        user_record = await asyncio.to_thread(
            firebase_auth.create_user,
            email=email,
            password=password,
            display_name=display_name,
            app=self.app,
        )
        logger.info(f"✅ Firebase account created: {user_record.uid}")
        return user_record.uid

    async def lookup_account(self, uid: str) -> dict:
        user_record = await asyncio.to_thread(firebase_auth.get_user, uid, app=self.app)
        return {"uid": user_record.uid, "email": user_record.email}
