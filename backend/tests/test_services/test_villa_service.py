"""VillaService tests with an in-memory repository (no database)."""

import itertools
from unittest.mock import AsyncMock

import pytest

from villa_api.exceptions import DuplicateName, InvalidArgument, ValidationError, VillaNotFound
from villa_api.models.villa import Villa
from villa_api.schemas.villa import PatchOperation, VillaCreate, VillaUpdate
from villa_api.services.villa_service import VillaService

pytestmark = pytest.mark.asyncio


class InMemoryVillaRepository:
    """Dict-backed stand-in for SqlAlchemyVillaRepository."""

    def __init__(self):
        self.rows: dict[int, Villa] = {}
        self._ids = itertools.count(1)

    async def fetch_all(self) -> list[Villa]:
        return [self.rows[k] for k in sorted(self.rows)]

    async def get_by_id(self, villa_id: int, track_changes: bool = True) -> Villa | None:
        return self.rows.get(villa_id)

    async def get_by_name(self, name: str, track_changes: bool = True) -> Villa | None:
        return next((v for v in self.rows.values() if v.name.lower() == name.lower()), None)

    async def create(self, villa: Villa) -> None:
        villa.id = next(self._ids)
        self.rows[villa.id] = villa

    async def update(self, villa: Villa) -> None:
        if villa.id not in self.rows:
            raise VillaNotFound(villa.id)
        self.rows[villa.id] = villa

    async def delete(self, villa: Villa) -> None:
        del self.rows[villa.id]


@pytest.fixture
def repository() -> InMemoryVillaRepository:
    return InMemoryVillaRepository()


@pytest.fixture
def service(repository: InMemoryVillaRepository) -> VillaService:
    return VillaService(repository)


async def _create(service: VillaService, name: str = "Villa Real", **fields):
    data = {"occupancy": 5, "rate": 200.0}
    data.update(fields)
    return await service.create_villa(VillaCreate(name=name, **data))


class TestVillaService:
    async def test_create_then_get(self, service: VillaService):
        created = await _create(service, description="Sea view")
        fetched = await service.get_villa(created.id)
        assert fetched == created
        assert fetched.description == "Sea view"

    async def test_duplicate_name_is_validation_error(self, service: VillaService):
        await _create(service)
        with pytest.raises(DuplicateName) as exc_info:
            await _create(service, name="villa REAL")
        assert isinstance(exc_info.value, ValidationError)
        assert "name" in exc_info.value.errors

    async def test_zero_id_rejected_without_store_access(self):
        repository = AsyncMock()
        service = VillaService(repository)
        for call in (service.get_villa(0), service.delete_villa(0), service.patch_villa(0, [])):
            with pytest.raises(InvalidArgument):
                await call
        repository.get_by_id.assert_not_called()

    async def test_get_missing(self, service: VillaService):
        with pytest.raises(VillaNotFound):
            await service.get_villa(3)

    async def test_update_requires_matching_id(self, service: VillaService):
        created = await _create(service)
        body = VillaUpdate(id=created.id + 1, name="X", occupancy=1, rate=1.0)
        with pytest.raises(InvalidArgument):
            await service.update_villa(created.id, body)
        with pytest.raises(InvalidArgument):
            await service.update_villa(created.id, None)

    async def test_update_is_full_replace(self, service: VillaService):
        created = await _create(service, description="Keep me?", amenities="pool", area_sqm=50)
        await service.update_villa(
            created.id, VillaUpdate(id=created.id, name="Villa Real", occupancy=2, rate=90.0)
        )
        fetched = await service.get_villa(created.id)
        assert fetched.description is None
        assert fetched.amenities is None
        assert fetched.area_sqm == 0
        assert fetched.occupancy == 2

    async def test_patch_missing_villa_is_invalid_argument(self, service: VillaService):
        with pytest.raises(InvalidArgument):
            await service.patch_villa(9, [])

    async def test_patch_none_document(self, service: VillaService):
        created = await _create(service)
        with pytest.raises(InvalidArgument):
            await service.patch_villa(created.id, None)

    async def test_patch_applies_operations(self, service: VillaService):
        created = await _create(service, amenities="pool")
        await service.patch_villa(
            created.id,
            [PatchOperation(op="replace", path="/amenities", value="pool, gym")],
        )
        fetched = await service.get_villa(created.id)
        assert fetched.amenities == "pool, gym"
        assert fetched.rate == created.rate

    async def test_delete_then_get(self, service: VillaService):
        created = await _create(service)
        await service.delete_villa(created.id)
        with pytest.raises(VillaNotFound):
            await service.get_villa(created.id)

    async def test_list(self, service: VillaService):
        assert await service.list_villas() == []
        await _create(service, name="A")
        await _create(service, name="B")
        assert [v.name for v in await service.list_villas()] == ["A", "B"]
