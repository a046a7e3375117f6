"""Shared fixtures: in-memory capabilities + FastAPI test client.

Every test gets fresh fakes for the document store, identity provider,
payment gateway and email sender, wired in through dependency overrides.
Background tasks finish before the test client returns, so confirmation
emails can be asserted right after the request.
"""

import itertools
import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests never pick up real credentials
os.environ.setdefault("RAZORPAY_KEY_ID", "rzp_test_fake")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "fake-secret")
os.environ.setdefault("GMAIL_ADDRESS", "")
os.environ.setdefault("GMAIL_APP_PASSWORD", "")

from buildconnect.capabilities import (  # noqa: E402
    get_document_store,
    get_email_sender,
    get_identity_provider,
    get_payment_gateway,
)
from buildconnect.email_service import EmailDeliveryError  # noqa: E402
from buildconnect.main import app  # noqa: E402


class DocumentNotFound(Exception):
    pass


class FakeDocumentStore:
    """Dict-backed store that records every call"""

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self.calls: list[tuple] = []
        self.fail = False
        self._ids = itertools.count(1)

    def _check(self, op, *args):
        self.calls.append((op, *args))
        if self.fail:
            raise RuntimeError("document store unavailable")

    def seed(self, collection: str, doc_id: str, doc: dict) -> None:
        self.collections.setdefault(collection, {})[doc_id] = dict(doc)

    async def create(self, collection, doc):
        self._check("create", collection, doc)
        doc_id = f"doc{next(self._ids):017d}"
        self.collections.setdefault(collection, {})[doc_id] = dict(doc)
        return doc_id

    async def get(self, collection, doc_id):
        self._check("get", collection, doc_id)
        doc = self.collections.get(collection, {}).get(doc_id)
        return {"id": doc_id, **doc} if doc is not None else None

    async def query(self, collection, field, value):
        self._check("query", collection, field, value)
        return [
            {"id": doc_id, **doc}
            for doc_id, doc in self.collections.get(collection, {}).items()
            if doc.get(field) == value
        ]

    async def list(self, collection):
        self._check("list", collection)
        return [{"id": doc_id, **doc} for doc_id, doc in self.collections.get(collection, {}).items()]

    async def set(self, collection, doc_id, doc):
        self._check("set", collection, doc_id, doc)
        self.collections.setdefault(collection, {})[doc_id] = dict(doc)

    async def update(self, collection, doc_id, patch):
        self._check("update", collection, doc_id, patch)
        docs = self.collections.get(collection, {})
        if doc_id not in docs:
            raise DocumentNotFound(f"No document to update: {collection}/{doc_id}")
        docs[doc_id].update(patch)

    async def delete(self, collection, doc_id):
        self._check("delete", collection, doc_id)
        self.collections.get(collection, {}).pop(doc_id, None)


class FakeIdentityProvider:
    def __init__(self):
        self.accounts: dict[str, dict] = {}
        self.create_error: Exception | None = None
        self.lookup_error: Exception | None = None
        self._ids = itertools.count(1)

    async def create_account(self, email, password, display_name):
        if self.create_error:
            raise self.create_error
        uid = f"uid-{next(self._ids)}"
        self.accounts[uid] = {"uid": uid, "email": email, "displayName": display_name}
        return uid

    async def lookup_account(self, uid):
        if self.lookup_error:
            raise self.lookup_error
        return self.accounts[uid]


class FakePaymentGateway:
    def __init__(self):
        self.calls: list[dict] = []
        self.error: Exception | None = None
        self.order: dict | None = None

    async def create_order(self, amount, currency, receipt):
        self.calls.append({"amount": amount, "currency": currency, "receipt": receipt})
        if self.error:
            raise self.error
        if self.order is not None:
            return self.order
        return {"id": "order_test123", "amount": amount, "currency": currency, "receipt": receipt}


class FakeEmailSender:
    def __init__(self):
        self.sent: list[dict] = []
        self.fail = False

    async def send(self, to, subject, html_content):
        self.sent.append({"to": to, "subject": subject, "html": html_content})
        if self.fail:
            raise EmailDeliveryError("SMTP send failed: connection refused")
        return {"id": "smtp-1", "success": True}


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def gateway():
    return FakePaymentGateway()


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
async def client(store, identity, gateway, email_sender):
    """FastAPI test client with every capability replaced by a fake."""
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
