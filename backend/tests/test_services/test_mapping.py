"""Tests for Villa <-> transfer shape mapping."""

from villa_api.mapping import (
    villa_from_create,
    villa_from_update,
    villa_to_read,
    villa_to_update,
    villas_to_read,
)
from villa_api.models.villa import Villa
from villa_api.schemas.villa import VillaCreate, VillaUpdate


def _stored_villa() -> Villa:
    return Villa(
        id=4,
        name="Casa Luna",
        description="Hilltop villa",
        image_url="https://example.com/luna.jpg",
        occupancy=4,
        rate=140.0,
        area_sqm=90,
        amenities="terrace",
    )


def test_create_shape_never_sets_id():
    villa = villa_from_create(VillaCreate(name="Casa Luna", occupancy=4, rate=140.0))
    assert villa.id is None
    assert villa.name == "Casa Luna"
    assert villa.area_sqm == 0


def test_update_shape_keeps_id():
    body = VillaUpdate(id=4, name="Casa Luna", occupancy=4, rate=140.0, amenities="terrace")
    villa = villa_from_update(body)
    assert villa.id == 4
    assert villa.amenities == "terrace"
    assert villa.description is None


def test_read_shape_copies_every_field():
    read = villa_to_read(_stored_villa())
    assert read.model_dump() == {
        "id": 4,
        "name": "Casa Luna",
        "description": "Hilltop villa",
        "image_url": "https://example.com/luna.jpg",
        "occupancy": 4,
        "rate": 140.0,
        "area_sqm": 90,
        "amenities": "terrace",
    }


def test_update_round_trip():
    villa = _stored_villa()
    assert villa_to_update(villa).model_dump() == villa_to_read(villa).model_dump()


def test_list_mapping_preserves_order():
    first, second = _stored_villa(), _stored_villa()
    second.id, second.name = 5, "Casa Sol"
    assert [v.id for v in villas_to_read([first, second])] == [4, 5]
    assert villas_to_read([]) == []
