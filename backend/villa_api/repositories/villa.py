"""Villa repository — single-entity CRUD against the async SQLAlchemy session."""

import logging
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from villa_api.exceptions import VillaNotFound
from villa_api.mapping import copy_content
from villa_api.models.villa import Villa

logger = logging.getLogger(__name__)


class VillaRepository(Protocol):
    """Persistence primitives used by the villa service."""

    async def fetch_all(self) -> list[Villa]: ...

    async def get_by_id(self, villa_id: int, track_changes: bool = True) -> Villa | None: ...

    async def get_by_name(self, name: str, track_changes: bool = True) -> Villa | None: ...

    async def create(self, villa: Villa) -> None: ...

    async def update(self, villa: Villa) -> None: ...

    async def delete(self, villa: Villa) -> None: ...


class SqlAlchemyVillaRepository:
    """VillaRepository backed by a request-scoped AsyncSession.

    Writes are flushed, not committed; the session owner decides when the
    transaction ends.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_all(self) -> list[Villa]:
        result = await self.session.execute(select(Villa).order_by(Villa.id))
        return list(result.scalars().all())

    async def get_by_id(self, villa_id: int, track_changes: bool = True) -> Villa | None:
        return await self._one(Villa.id == villa_id, track_changes)

    async def get_by_name(self, name: str, track_changes: bool = True) -> Villa | None:
        """Case-insensitive lookup on ``name``."""
        return await self._one(func.lower(Villa.name) == name.lower(), track_changes)

    async def create(self, villa: Villa) -> None:
        self.session.add(villa)
        await self.session.flush()
        await self.session.refresh(villa)
        logger.debug("Inserted villa %s", villa.id)

    async def update(self, villa: Villa) -> None:
        """Replace every non-id column of the stored row matching ``villa.id``."""
        stored = await self.get_by_id(villa.id)
        if stored is None:
            raise VillaNotFound(villa.id)

        copy_content(villa, stored)
        await self.session.flush()
        await self.session.refresh(stored)

    async def delete(self, villa: Villa) -> None:
        await self.session.delete(villa)
        await self.session.flush()

    async def _one(self, criterion, track_changes: bool) -> Villa | None:
        result = await self.session.execute(select(Villa).where(criterion).limit(1))
        villa = result.scalar_one_or_none()
        if villa is not None and not track_changes:
            self.session.expunge(villa)
        return villa
