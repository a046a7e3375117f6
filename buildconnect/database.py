"""Firestore document store backed by the Firebase Admin SDK"""

import logging
import os
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore_v1.base_query import FieldFilter

from .config import FIREBASE_CREDENTIALS_PATH, FIREBASE_PROJECT_ID

logger = logging.getLogger(__name__)


def initialize_firebase() -> firebase_admin.App:
    """Initialize Firebase Admin SDK (only once per process)"""
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": FIREBASE_PROJECT_ID} if FIREBASE_PROJECT_ID else None

    if FIREBASE_CREDENTIALS_PATH and os.path.isfile(FIREBASE_CREDENTIALS_PATH):
        cred = credentials.Certificate(FIREBASE_CREDENTIALS_PATH)
        app = firebase_admin.initialize_app(cred, options)
        logger.info(f"✅ Firebase Admin initialized with service account {FIREBASE_CREDENTIALS_PATH}")
        return app

    logger.warning(
        f"⚠️ Service account file {FIREBASE_CREDENTIALS_PATH} not found, "
        "using Application Default Credentials"
    )
    app = firebase_admin.initialize_app(credentials.ApplicationDefault(), options)
    logger.info("Firebase Admin initialized with default credentials")
    return app


def _snapshot_to_dict(snapshot) -> dict:
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


class FirestoreDocumentStore:
    """Async Firestore access. Errors from the SDK propagate to the caller."""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        self.client = firestore_async.client(app)

    async def create(self, collection: str, doc: dict) -> str:
        _, doc_ref = await self.client.collection(collection).add(doc)
        return doc_ref.id

    async def get(self, collection: str, doc_id: str) -> Optional[dict]:
        snapshot = await self.client.collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return _snapshot_to_dict(snapshot)

    async def query(self, collection: str, field: str, value: Any) -> list[dict]:
        query = self.client.collection(collection).where(filter=FieldFilter(field, "==", value))
        snapshots = await query.get()
        return [_snapshot_to_dict(s) for s in snapshots]

    async def list(self, collection: str) -> list[dict]:
        snapshots = await self.client.collection(collection).get()
        return [_snapshot_to_dict(s) for s in snapshots]

    async def set(self, collection: str, doc_id: str, doc: dict) -> None:
        await self.client.collection(collection).document(doc_id).set(doc)

    async def update(self, collection: str, doc_id: str, patch: dict) -> None:
        # Firestore raises NotFound when the document does not exist
        await self.client.collection(collection).document(doc_id).update(patch)

    async def delete(self, collection: str, doc_id: str) -> None:
        await self.client.collection(collection).document(doc_id).delete()
