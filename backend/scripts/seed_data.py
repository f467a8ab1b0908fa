"""Seed the database with the two starter villas.

The same records are inserted by the ``0002_seed_villas`` migration; this
script is for databases built with ``Base.metadata.create_all`` or wiped by
hand.

Run from the backend directory:
    python -m scripts.seed_data
"""

import asyncio
import sys
from pathlib import Path

# Add backend to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy.ext.asyncio import AsyncSession

from villa_api.database import async_session_factory, engine
from villa_api.models.villa import Villa
from villa_api.repositories.villa import SqlAlchemyVillaRepository

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

VILLAS = [
    {
        "name": "Villa Real",
        "description": "Detalle de la Villa...",
        "image_url": "",
        "occupancy": 5,
        "rate": 200.0,
        "area_sqm": 50,
        "amenities": "",
    },
    {
        "name": "Premium Vista a la Piscina",
        "description": "Detalle de la Villa...",
        "image_url": "",
        "occupancy": 4,
        "rate": 150.0,
        "area_sqm": 40,
        "amenities": "",
    },
]


async def seed_villas(session: AsyncSession) -> list[Villa]:
    """Insert every seed villa whose name is not taken yet. Returns the new rows."""
    repository = SqlAlchemyVillaRepository(session)
    created: list[Villa] = []
    for villa_data in VILLAS:
        if await repository.get_by_name(villa_data["name"]) is not None:
            print(f"   ⏭️  {villa_data['name']} already exists")
            continue
        villa = Villa(**villa_data)
        await repository.create(villa)
        created.append(villa)
        print(f"   🏠 {villa.name} (id={villa.id}, ${villa.rate}/night)")
    return created


async def seed() -> None:
    async with async_session_factory() as session:
        created = await seed_villas(session)
        await session.commit()

    await engine.dispose()
    print(f"✅ Seeded {len(created)} villa(s)")


if __name__ == "__main__":
    asyncio.run(seed())
