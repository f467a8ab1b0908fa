"""Villa service — request-level rules for the villa resource.

Validates identifiers, enforces name uniqueness, and maps between the
Villa model and its transfer shapes. Persistence goes through the
repository the service was built with.
"""

import logging
from collections.abc import Sequence

from villa_api.exceptions import DuplicateName, InvalidArgument, VillaNotFound
from villa_api.mapping import (
    villa_from_create,
    villa_from_update,
    villa_to_read,
    villa_to_update,
    villas_to_read,
)
from villa_api.repositories.villa import VillaRepository
from villa_api.schemas.villa import PatchOperation, VillaCreate, VillaRead, VillaUpdate
from villa_api.services.patching import apply_patch, operations_to_patch

logger = logging.getLogger(__name__)


class VillaService:
    def __init__(self, repository: VillaRepository):
        self.repository = repository

    async def list_villas(self) -> list[VillaRead]:
        logger.info("Fetching all villas")
        villas = await self.repository.fetch_all()
        return villas_to_read(villas)

    async def get_villa(self, villa_id: int) -> VillaRead:
        if villa_id == 0:
            logger.error("Rejected villa lookup with id %s", villa_id)
            raise InvalidArgument("Villa id must be non-zero")

        villa = await self.repository.get_by_id(villa_id)
        if villa is None:
            raise VillaNotFound(villa_id)
        return villa_to_read(villa)

    async def create_villa(self, body: VillaCreate) -> VillaRead:
        """Insert a new villa unless its name is already taken.

        The name check and the insert are separate round-trips; two
        concurrent creates with the same name can both succeed.
        """
        if await self.repository.get_by_name(body.name) is not None:
            logger.warning("Villa name already exists: %s", body.name)
            raise DuplicateName(body.name)

        villa = villa_from_create(body)
        await self.repository.create(villa)
        logger.info("Created villa %s (%s)", villa.id, villa.name)
        return villa_to_read(villa)

    async def update_villa(self, villa_id: int, body: VillaUpdate | None) -> None:
        """Replace every non-id field of the villa with ``body``'s values."""
        if body is None or body.id != villa_id:
            raise InvalidArgument("Body id must match the villa id in the path")

        await self.repository.update(villa_from_update(body))
        logger.info("Replaced villa %s", villa_id)

    async def patch_villa(self, villa_id: int, operations: Sequence[PatchOperation] | None) -> None:
        if operations is None or villa_id == 0:
            raise InvalidArgument("A non-zero villa id and a patch document are required")

        snapshot = await self.repository.get_by_id(villa_id, track_changes=False)
        if snapshot is None:
            raise InvalidArgument(f"Villa {villa_id} does not exist")

        current = villa_to_update(snapshot)
        patched = apply_patch(current, operations_to_patch(current, operations))

        await self.repository.update(villa_from_update(patched))
        logger.info("Patched villa %s with %d operation(s)", villa_id, len(operations))

    async def delete_villa(self, villa_id: int) -> None:
        if villa_id == 0:
            raise InvalidArgument("Villa id must be non-zero")

        villa = await self.repository.get_by_id(villa_id)
        if villa is None:
            raise VillaNotFound(villa_id)

        await self.repository.delete(villa)
        logger.info("Deleted villa %s", villa_id)
