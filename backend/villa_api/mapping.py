"""Field-by-field mapping between the Villa model and its transfer shapes."""

from collections.abc import Iterable

from villa_api.models.villa import Villa
from villa_api.schemas.villa import VillaCreate, VillaRead, VillaUpdate

_CONTENT_FIELDS = (
    "name",
    "description",
    "image_url",
    "occupancy",
    "rate",
    "area_sqm",
    "amenities",
)


def villa_to_read(villa: Villa) -> VillaRead:
    return VillaRead.model_validate(villa)


def villas_to_read(villas: Iterable[Villa]) -> list[VillaRead]:
    return [villa_to_read(v) for v in villas]


def villa_to_update(villa: Villa) -> VillaUpdate:
    return VillaUpdate.model_validate(villa)


def villa_from_create(body: VillaCreate) -> Villa:
    """Build a transient Villa. The id is left for the store to assign."""
    return Villa(**{field: getattr(body, field) for field in _CONTENT_FIELDS})


def villa_from_update(body: VillaUpdate) -> Villa:
    """Build a transient Villa that carries the id of the row to replace."""
    return Villa(id=body.id, **{field: getattr(body, field) for field in _CONTENT_FIELDS})


def copy_content(source: Villa, target: Villa) -> None:
    """Overwrite every non-id column of ``target`` with ``source``'s values."""
    for field in _CONTENT_FIELDS:
        setattr(target, field, getattr(source, field))
