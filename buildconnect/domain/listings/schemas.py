"""Listing domain schemas - listing kinds and request models"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel

from ...collection_names import (
    COLLECTION_CONTRACTORS,
    COLLECTION_EQUIPMENT,
    COLLECTION_MATERIALS,
)


class ListingCreate(BaseModel):
    """Schema for the merchant add-listing form (fields shared by all kinds)"""

    listingType: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Union[int, float, str]] = None
    imageUrl: Optional[str] = None
    location: Optional[Any] = None
    merchantId: Optional[str] = None
    rateType: Optional[str] = None
    specialization: Optional[str] = None
    unit: Optional[str] = None


class ListingKind(str, Enum):
    """The closed set of listing collections"""

    EQUIPMENT = COLLECTION_EQUIPMENT
    MATERIAL = COLLECTION_MATERIALS
    CONTRACTOR = COLLECTION_CONTRACTORS

    @property
    def collection(self) -> str:
        return self.value

    @classmethod
    def from_collection(cls, collection_name: str) -> Optional["ListingKind"]:
        try:
            return cls(collection_name)
        except ValueError:
            return None

    @classmethod
    def from_listing_type(cls, listing_type: Optional[str]) -> Optional["ListingKind"]:
        return LISTING_TYPES.get(listing_type or "")

    def build_document(self, data: ListingCreate, price: Union[int, float]) -> dict:
        """Map the shared form fields onto this kind's document fields"""
        if self is ListingKind.EQUIPMENT:
            doc = {
                "name": data.name,
                "description": data.description,
                "rate": price,
                "rateType": data.rateType,
                "imageUrl": data.imageUrl,
                "location": data.location,
                "merchantId": data.merchantId,
                "category": "General",
                "availabilityStatus": "Available",
            }
        elif self is ListingKind.MATERIAL:
            doc = {
                "name": data.name,
                "specs": data.description,
                "pricePerUnit": price,
                "imageUrl": data.imageUrl,
                "merchantId": data.merchantId,
                "unit": data.unit,
                "stockQuantity": 100,
            }
        else:
            doc = {
                "name": data.name,
                "bio": data.description,
                "rate": price,
                "profileImageUrl": data.imageUrl,
                "location": data.location,
                "merchantId": data.merchantId,
                "rateType": data.rateType,
                "specialization": data.specialization,
            }
        # Fields the merchant left out are not written
        return {key: value for key, value in doc.items() if value is not None}


LISTING_TYPES = {
    "Equipment": ListingKind.EQUIPMENT,
    "Material": ListingKind.MATERIAL,
    "Contractor": ListingKind.CONTRACTOR,
}


class ListingCreatedResponse(BaseModel):
    message: str
    id: str


class MessageResponse(BaseModel):
    message: str
