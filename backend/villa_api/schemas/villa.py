"""Pydantic v2 request/response schemas for villa endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Bounds of the 32-bit INTEGER columns backing the villa table.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class VillaCreate(BaseModel):
    """Schema for creating a new villa. The id is assigned by the store."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=512)
    occupancy: int = Field(..., ge=0, le=INT32_MAX)
    rate: float = Field(..., ge=0)
    area_sqm: int = Field(0, ge=0, le=INT32_MAX)
    amenities: str | None = Field(None, max_length=1024)


class VillaUpdate(BaseModel):
    """Schema for replacing a villa wholesale.

    Omitted fields fall back to their defaults; nothing from the stored
    record is preserved.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, from_attributes=True)

    id: int = Field(..., ge=INT32_MIN, le=INT32_MAX)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    image_url: str | None = Field(None, max_length=512)
    occupancy: int = Field(..., ge=0, le=INT32_MAX)
    rate: float = Field(..., ge=0)
    area_sqm: int = Field(0, ge=0, le=INT32_MAX)
    amenities: str | None = Field(None, max_length=1024)


class VillaPatch(BaseModel):
    """Field-optional form of VillaUpdate. Only explicitly set fields apply."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    occupancy: int | None = None
    rate: float | None = None
    area_sqm: int | None = None
    amenities: str | None = None


class PatchOperation(BaseModel):
    """A single JSON-Patch style instruction against a top-level field."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "replace", "remove", "copy", "move", "test"]
    path: str = Field(..., pattern=r"^/[A-Za-z_]+$")
    value: Any = None
    from_: str | None = Field(None, alias="from", pattern=r"^/[A-Za-z_]+$")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class VillaRead(BaseModel):
    """Public villa information returned from the API."""

    id: int
    name: str
    description: str | None = None
    image_url: str | None = None
    occupancy: int
    rate: float
    area_sqm: int
    amenities: str | None = None

    model_config = ConfigDict(from_attributes=True)
