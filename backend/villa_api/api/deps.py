"""Shared API dependencies — single import point for all routers.

The service is wired explicitly: ``get_villa_repository`` picks the
repository implementation and ``get_villa_service`` hands it to the
service. Tests replace either one through ``app.dependency_overrides``::

    from villa_api.api.deps import get_db, get_villa_service
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from villa_api.database import get_db
from villa_api.repositories.villa import SqlAlchemyVillaRepository, VillaRepository
from villa_api.services.villa_service import VillaService


def get_villa_repository(db: AsyncSession = Depends(get_db)) -> VillaRepository:
    return SqlAlchemyVillaRepository(db)


def get_villa_service(
    repository: VillaRepository = Depends(get_villa_repository),
) -> VillaService:
    return VillaService(repository)


__all__ = [
    "get_db",
    "get_villa_repository",
    "get_villa_service",
]
