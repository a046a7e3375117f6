"""External capability contracts.

Routes and services only depend on these Protocols. The Firebase, Razorpay
and SMTP implementations are built once at startup (see main.lifespan) and
handed out through the get_* dependencies, so tests swap them for fakes
with app.dependency_overrides.
"""

from typing import Any, Optional, Protocol

from fastapi import Request


class DocumentStore(Protocol):
    """Schemaless document collections. Returned documents include their "id"."""

    async def create(self, collection: str, doc: dict) -> str: ...

    async def get(self, collection: str, doc_id: str) -> Optional[dict]: ...

    async def query(self, collection: str, field: str, value: Any) -> list[dict]: ...

    async def list(self, collection: str) -> list[dict]: ...

    async def set(self, collection: str, doc_id: str, doc: dict) -> None: ...

    async def update(self, collection: str, doc_id: str, patch: dict) -> None: ...

    async def delete(self, collection: str, doc_id: str) -> None: ...


class IdentityProvider(Protocol):
    """User accounts (email/password sign-in)."""

    async def create_account(self, email: str, password: str, display_name: str) -> str: ...

    async def lookup_account(self, uid: str) -> dict: ...


class PaymentGateway(Protocol):
    """Payment order creation. Raises PaymentGatewayError on API errors."""

    async def create_order(self, amount: int, currency: str, receipt: str) -> Optional[dict]: ...


class EmailSender(Protocol):
    """Transactional email. Raises EmailDeliveryError when sending fails."""

    async def send(self, to: str, subject: str, html_content: str) -> dict: ...


# ============================================================================
# DEPENDENCIES
# ============================================================================


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_identity_provider(request: Request) -> IdentityProvider:
    return request.app.state.identity_provider


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender
