"""Listing router - FastAPI endpoints for merchant listings and catalog reads"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status

from ...capabilities import DocumentStore, get_document_store
from .schemas import ListingCreate, ListingCreatedResponse, ListingKind, MessageResponse
from .service import ListingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Listings"])


def get_listing_service(store: DocumentStore = Depends(get_document_store)) -> ListingService:
    """Dependency injection for ListingService"""
    return ListingService(store)


# ============================================================================
# MERCHANT OPERATIONS
# ============================================================================


@router.post(
    "/add-listing",
    response_model=ListingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_listing(
    data: ListingCreate,
    service: ListingService = Depends(get_listing_service),
):
    """Create an Equipment, Material or Contractor listing"""
    listing_id = await service.create_listing(data)
    return ListingCreatedResponse(message="Listing created successfully!", id=listing_id)


@router.put("/listing/{collection_name}/{listing_id}", response_model=MessageResponse)
async def update_listing(
    collection_name: str,
    listing_id: str,
    patch: dict[str, Any] = Body(...),
    service: ListingService = Depends(get_listing_service),
):
    """Update a listing with an arbitrary patch"""
    return await service.update_listing(collection_name, listing_id, patch)


@router.delete("/listing/{collection_name}/{listing_id}", response_model=MessageResponse)
async def delete_listing(
    collection_name: str,
    listing_id: str,
    service: ListingService = Depends(get_listing_service),
):
    """Remove a listing"""
    return await service.delete_listing(collection_name, listing_id)


@router.get("/my-listings/{user_id}")
async def get_my_listings(
    user_id: str,
    service: ListingService = Depends(get_listing_service),
) -> list[dict]:
    """Get every listing owned by a merchant"""
    return await service.get_merchant_listings(user_id)


# ============================================================================
# CATALOG
# ============================================================================


@router.get("/equipment")
async def get_equipment(service: ListingService = Depends(get_listing_service)) -> list[dict]:
    return await service.get_all_listings(ListingKind.EQUIPMENT)


@router.get("/materials")
async def get_materials(service: ListingService = Depends(get_listing_service)) -> list[dict]:
    return await service.get_all_listings(ListingKind.MATERIAL)


@router.get("/contractors")
async def get_contractors(service: ListingService = Depends(get_listing_service)) -> list[dict]:
    return await service.get_all_listings(ListingKind.CONTRACTOR)
