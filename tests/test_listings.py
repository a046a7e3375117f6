"""Listing routes: add, update, delete, merchant view and catalog reads."""

import pytest

from buildconnect.domain.listings.schemas import ListingCreate, ListingKind
from buildconnect.domain.listings.service import parse_price


def listing_payload(**overrides):
    payload = {
        "listingType": "Material",
        "name": "OPC Cement 53 Grade",
        "description": "50kg bag, high early strength",
        "price": "385",
        "imageUrl": "https://cdn.example.com/cement.jpg",
        "merchantId": "merchant-1",
        "unit": "bag",
    }
    payload.update(overrides)
    return payload


# ─── add-listing ─────────────────────────────────────────────────


async def test_material_listing_round_trip(client):
    res = await client.post("/api/add-listing", json=listing_payload())
    assert res.status_code == 201
    listing_id = res.json()["id"]

    res = await client.get("/api/materials")

    assert res.status_code == 200
    [material] = [m for m in res.json() if m["id"] == listing_id]
    assert material["specs"] == "50kg bag, high early strength"
    assert material["pricePerUnit"] == 385
    assert material["stockQuantity"] == 100
    assert material["unit"] == "bag"
    assert "description" not in material


async def test_equipment_listing_fields(client, store):
    res = await client.post(
        "/api/add-listing",
        json=listing_payload(
            listingType="Equipment",
            name="JCB 3DX",
            description="Backhoe loader with operator",
            price=2500.5,
            rateType="per day",
            location="Pune",
        ),
    )

    doc = store.collections["equipment"][res.json()["id"]]
    assert doc["rate"] == 2500.5
    assert doc["rateType"] == "per day"
    assert doc["description"] == "Backhoe loader with operator"
    assert doc["category"] == "General"
    assert doc["availabilityStatus"] == "Available"


async def test_contractor_listing_fields(client, store):
    res = await client.post(
        "/api/add-listing",
        json=listing_payload(
            listingType="Contractor",
            name="Ravi Kumar",
            description="15 years of residential masonry",
            price=900,
            specialization="Masonry",
            rateType="per day",
        ),
    )

    doc = store.collections["contractors"][res.json()["id"]]
    assert doc["bio"] == "15 years of residential masonry"
    assert doc["rate"] == 900
    assert doc["profileImageUrl"] == "https://cdn.example.com/cement.jpg"
    assert doc["specialization"] == "Masonry"


@pytest.mark.parametrize("missing", ["listingType", "name", "price", "merchantId"])
async def test_missing_required_field_returns_400(client, store, missing):
    res = await client.post("/api/add-listing", json=listing_payload(**{missing: None}))

    assert res.status_code == 400
    assert res.json()["detail"] == "Missing required fields."
    assert store.calls == []


async def test_unknown_listing_type_returns_400(client, store):
    res = await client.post("/api/add-listing", json=listing_payload(listingType="Vehicle"))

    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid listing type."
    assert store.calls == []


async def test_non_numeric_price_returns_400(client, store):
    res = await client.post("/api/add-listing", json=listing_payload(price="cheap"))

    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid price."
    assert store.calls == []


async def test_add_listing_store_failure_returns_500(client, store):
    store.fail = True

    res = await client.post("/api/add-listing", json=listing_payload())

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to create listing."


# ─── update / delete ─────────────────────────────────────────────


@pytest.mark.parametrize("collection", ["users", "bookings", "Equipment"])
async def test_update_rejects_unknown_collection(client, store, collection):
    res = await client.put(f"/api/listing/{collection}/abc", json={"name": "x"})

    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid collection specified."
    assert store.calls == []


async def test_update_applies_arbitrary_patch(client, store):
    store.seed("equipment", "eq1", {"name": "Crane", "rate": 5000, "merchantId": "m1"})
    patch = {"rate": 5500, "availabilityStatus": "Booked", "extras": {"operator": True}}

    res = await client.put("/api/listing/equipment/eq1", json=patch)

    assert res.status_code == 200
    assert res.json() == {"message": "Listing updated successfully!"}
    assert store.calls == [("update", "equipment", "eq1", patch)]
    assert store.collections["equipment"]["eq1"]["availabilityStatus"] == "Booked"


async def test_update_store_failure_returns_500(client):
    res = await client.put("/api/listing/materials/missing", json={"unit": "kg"})

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to update listing."


async def test_delete_rejects_unknown_collection(client, store):
    res = await client.delete("/api/listing/users/uid-1")

    assert res.status_code == 400
    assert store.calls == []


async def test_delete_removes_listing(client, store):
    store.seed("contractors", "c1", {"name": "Ravi", "merchantId": "m1"})

    res = await client.delete("/api/listing/contractors/c1")

    assert res.status_code == 200
    assert res.json() == {"message": "Listing removed successfully!"}
    assert "c1" not in store.collections["contractors"]


async def test_delete_store_failure_returns_500(client, store):
    store.fail = True

    res = await client.delete("/api/listing/contractors/c1")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to remove listing."


# ─── reads ───────────────────────────────────────────────────────


async def test_my_listings_queries_each_collection(client, store):
    store.seed("equipment", "e1", {"name": "Crane", "merchantId": "m1"})
    store.seed("equipment", "e2", {"name": "Drill", "merchantId": "m2"})
    store.seed("materials", "mat1", {"name": "Sand", "merchantId": "m1"})
    store.seed("materials", "mat2", {"name": "Bricks", "merchantId": "m1"})
    store.seed("contractors", "c1", {"name": "Ravi", "merchantId": "m1"})

    res = await client.get("/api/my-listings/m1")

    assert res.status_code == 200
    listings = res.json()
    assert len(listings) == 4
    assert [(item["id"], item["collection"]) for item in listings] == [
        ("e1", "equipment"),
        ("mat1", "materials"),
        ("mat2", "materials"),
        ("c1", "contractors"),
    ]
    queries = sorted(call[1] for call in store.calls if call[0] == "query")
    assert queries == ["contractors", "equipment", "materials"]


async def test_my_listings_store_failure_returns_500(client, store):
    store.fail = True

    res = await client.get("/api/my-listings/m1")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to fetch listings."


@pytest.mark.parametrize("path,collection", [
    ("/api/equipment", "equipment"),
    ("/api/materials", "materials"),
    ("/api/contractors", "contractors"),
])
async def test_catalog_returns_every_document(client, store, path, collection):
    store.seed(collection, "a", {"name": "A", "merchantId": "m1"})
    store.seed(collection, "b", {"name": "B", "merchantId": "m2"})

    res = await client.get(path)

    assert res.status_code == 200
    assert sorted(doc["id"] for doc in res.json()) == ["a", "b"]


async def test_catalog_store_failure_returns_500(client, store):
    store.fail = True

    res = await client.get("/api/contractors")

    assert res.status_code == 500
    assert res.json()["detail"] == "Something went wrong"


# ─── ListingKind / price parsing ─────────────────────────────────


def test_listing_kind_from_collection():
    assert ListingKind.from_collection("materials") is ListingKind.MATERIAL
    assert ListingKind.from_collection("users") is None


def test_build_document_skips_absent_fields():
    data = ListingCreate(listingType="Equipment", name="Crane", price=10, merchantId="m1")

    doc = ListingKind.EQUIPMENT.build_document(data, 10)

    assert doc == {
        "name": "Crane",
        "rate": 10,
        "merchantId": "m1",
        "category": "General",
        "availabilityStatus": "Available",
    }


@pytest.mark.parametrize("raw,expected", [("385", 385), (" 12.5 ", 12.5), (1e3, 1000), (99.99, 99.99)])
def test_parse_price(raw, expected):
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "nan", "inf", True])
def test_parse_price_rejects(raw):
    with pytest.raises((TypeError, ValueError)):
        parse_price(raw)
