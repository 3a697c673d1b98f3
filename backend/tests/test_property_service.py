from decimal import Decimal

from app.crud.property import WRITABLE_FIELDS
from app.schemas.property import PriceRange, PropertyCreate, PropertyUpdate
from app.services.property import property_service


async def test_find_properties_applies_offset(db):
    found = await property_service.find_properties(db, page=3, limit=5)

    assert [p.id for p in found] == [11, 12, 13, 14, 15]


async def test_find_properties_past_last_page_is_empty(db):
    assert await property_service.find_properties(db, page=100, limit=10) == []


async def test_find_properties_min_price_only(db):
    found = await property_service.find_properties(
        db, page=1, limit=200, price=PriceRange(min=18850000)
    )

    assert [p.id for p in found] == [125, 126]


async def test_find_properties_max_price_only(db):
    found = await property_service.find_properties(
        db, page=1, limit=200, price=PriceRange(max=250000)
    )

    assert [p.id for p in found] == [1]


async def test_find_properties_empty_range(db):
    found = await property_service.find_properties(
        db, page=1, limit=10, price=PriceRange(min=500, max=100)
    )

    assert found == []


async def test_find_property_by_id_missing_returns_none(db):
    assert await property_service.find_property_by_id(db, property_id=999) is None


async def test_create_property_assigns_id(db):
    created = await property_service.create_property(
        db,
        obj_in=PropertyCreate(
            address="1 Test Way", price=1.125, bedrooms=1, bathrooms=1, type=None
        ),
    )

    assert created.id == 127
    assert created.price == Decimal("1.125")
    assert created.type is None


async def test_update_property_ignores_null_fields(db):
    updated = await property_service.update_property(
        db,
        property_id=2,
        obj_in=PropertyUpdate(address="2 New Rd", bedrooms=None),
    )

    assert updated.address == "2 New Rd"
    assert updated.bedrooms == 3


async def test_update_property_missing_returns_none(db):
    result = await property_service.update_property(
        db, property_id=999, obj_in=PropertyUpdate(address="nowhere")
    )

    assert result is None


async def test_delete_property_returns_snapshot(db):
    deleted = await property_service.delete_property_by_id(db, property_id=3)

    assert deleted.id == 3
    assert deleted.address == "103 Cedar Ln"
    assert await property_service.find_property_by_id(db, property_id=3) is None
    assert await property_service.delete_property_by_id(db, property_id=3) is None


def test_writable_fields_exclude_id():
    assert "id" not in WRITABLE_FIELDS
    assert set(WRITABLE_FIELDS) == set(PropertyCreate.model_fields)
