"""Villa CRUD API routes."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Request, Response, status

from villa_api.api.deps import get_villa_service
from villa_api.schemas.villa import (
    INT32_MAX,
    INT32_MIN,
    PatchOperation,
    VillaCreate,
    VillaRead,
    VillaUpdate,
)
from villa_api.services.villa_service import VillaService

router = APIRouter(prefix="/villa", tags=["villa"])

VillaId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.get(
    "",
    response_model=list[VillaRead],
    summary="List all villas",
)
async def list_villas(
    service: VillaService = Depends(get_villa_service),
) -> list[VillaRead]:
    return await service.list_villas()


@router.get(
    "/{villa_id}",
    response_model=VillaRead,
    name="get_villa",
    summary="Get a villa by ID",
    responses={400: {"description": "Villa id is zero"}, 404: {"description": "Villa not found"}},
)
async def get_villa(
    villa_id: VillaId,
    service: VillaService = Depends(get_villa_service),
) -> VillaRead:
    return await service.get_villa(villa_id)


@router.post(
    "",
    response_model=VillaRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new villa",
    responses={400: {"description": "Invalid payload or duplicate name"}},
)
async def create_villa(
    body: VillaCreate,
    request: Request,
    response: Response,
    service: VillaService = Depends(get_villa_service),
) -> VillaRead:
    """Create a villa and point the Location header at it."""
    villa = await service.create_villa(body)
    response.headers["Location"] = str(request.url_for("get_villa", villa_id=villa.id))
    return villa


@router.put(
    "/{villa_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a villa",
    responses={400: {"description": "Missing body or id mismatch"}, 404: {"description": "Villa not found"}},
)
async def update_villa(
    villa_id: VillaId,
    body: VillaUpdate | None = Body(None),
    service: VillaService = Depends(get_villa_service),
) -> None:
    """Full replacement. Fields omitted from the body are reset to their defaults."""
    await service.update_villa(villa_id, body)


@router.patch(
    "/{villa_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Partially update a villa",
    responses={400: {"description": "Invalid id, missing villa, or invalid patch"}},
)
async def patch_villa(
    villa_id: VillaId,
    operations: list[PatchOperation] | None = Body(None),
    service: VillaService = Depends(get_villa_service),
) -> None:
    """Apply JSON-Patch style operations, e.g. ``[{"op": "replace", "path": "/rate", "value": 90}]``."""
    await service.patch_villa(villa_id, operations)


@router.delete(
    "/{villa_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a villa",
    responses={400: {"description": "Villa id is zero"}, 404: {"description": "Villa not found"}},
)
async def delete_villa(
    villa_id: VillaId,
    service: VillaService = Depends(get_villa_service),
) -> None:
    await service.delete_villa(villa_id)
