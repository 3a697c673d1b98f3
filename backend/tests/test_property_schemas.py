import pytest
from pydantic import ValidationError

from app.schemas.property import (
    MAX_PRICE_FILTER,
    PriceRange,
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
)


def test_create_requires_type_key_but_allows_null():
    payload = {"address": "a", "price": 1.0, "bedrooms": 1, "bathrooms": 1}

    with pytest.raises(ValidationError):
        PropertyCreate.model_validate(payload)

    assert PropertyCreate.model_validate({**payload, "type": None}).type is None


def test_create_accepts_integer_price():
    created = PropertyCreate.model_validate(
        {"address": "a", "price": 250000, "bedrooms": 2, "bathrooms": 1, "type": "Townhouse"}
    )

    assert created.price == 250000


@pytest.mark.parametrize(
    "field, value",
    [
        ("address", 42),
        ("price", "250000"),
        ("bedrooms", "2"),
        ("bathrooms", 1.5),
        ("type", 7),
    ],
)
def test_create_is_strict(field, value):
    payload = {"address": "a", "price": 1.0, "bedrooms": 1, "bathrooms": 1, "type": None}
    payload[field] = value

    with pytest.raises(ValidationError):
        PropertyCreate.model_validate(payload)


def test_update_rejects_unknown_fields():
    with pytest.raises(ValidationError) as exc_info:
        PropertyUpdate.model_validate({"garage": True})

    assert exc_info.value.errors()[0]["type"] == "extra_forbidden"


def test_update_all_fields_optional():
    assert PropertyUpdate().model_dump(exclude_none=True) == {}


def test_price_range_min_must_not_be_negative():
    with pytest.raises(ValidationError):
        PriceRange(min=-1)


def test_response_reads_orm_attributes():
    class Row:
        id = 1
        address = "101 Oak Ave"
        price = 250000
        bedrooms = 2
        bathrooms = 2
        type = None

    assert PropertyResponse.model_validate(Row()).model_dump() == {
        "id": 1,
        "address": "101 Oak Ave",
        "price": 250000.0,
        "bedrooms": 2,
        "bathrooms": 2,
        "type": None,
    }


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_price_must_be_finite(value):
    payload = {"address": "a", "price": value, "bedrooms": 1, "bathrooms": 1, "type": None}

    with pytest.raises(ValidationError):
        PropertyCreate.model_validate(payload)
    with pytest.raises(ValidationError):
        PropertyUpdate.model_validate({"price": value})


def test_price_range_bounded_to_bigint():
    assert PriceRange(min=MAX_PRICE_FILTER, max=MAX_PRICE_FILTER).max == MAX_PRICE_FILTER

    with pytest.raises(ValidationError):
        PriceRange(min=MAX_PRICE_FILTER + 1)
    with pytest.raises(ValidationError):
        PriceRange(max=MAX_PRICE_FILTER + 1)
