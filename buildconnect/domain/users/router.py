"""User router - registration endpoint"""

from fastapi import APIRouter, Depends, status

from ...capabilities import (
    DocumentStore,
    IdentityProvider,
    get_document_store,
    get_identity_provider,
)
from .schemas import UserCreatedResponse, UserRegister
from .service import UserService

router = APIRouter(prefix="/api", tags=["Users"])


def get_user_service(
    store: DocumentStore = Depends(get_document_store),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> UserService:
    """Dependency injection for UserService"""
    return UserService(store, identity)


@router.post("/register", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserRegister,
    service: UserService = Depends(get_user_service),
):
    """Register a client or merchant"""
    uid = await service.register(data)
    return UserCreatedResponse(message="User created successfully!", uid=uid)
