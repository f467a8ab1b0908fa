"""seed_villas

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19 10:05:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0002'
down_revision: Union[str, Sequence[str], None] = '0001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

villas = sa.table(
    "villas",
    sa.column("id", sa.Integer),
    sa.column("name", sa.String),
    sa.column("description", sa.Text),
    sa.column("image_url", sa.String),
    sa.column("occupancy", sa.Integer),
    sa.column("rate", sa.Float),
    sa.column("area_sqm", sa.Integer),
    sa.column("amenities", sa.String),
)


def upgrade() -> None:
    op.bulk_insert(
        villas,
        [
            {
                "id": 1,
                "name": "Villa Real",
                "description": "Detalle de la Villa...",
                "image_url": "",
                "occupancy": 5,
                "rate": 200.0,
                "area_sqm": 50,
                "amenities": "",
            },
            {
                "id": 2,
                "name": "Premium Vista a la Piscina",
                "description": "Detalle de la Villa...",
                "image_url": "",
                "occupancy": 4,
                "rate": 150.0,
                "area_sqm": 40,
                "amenities": "",
            },
        ],
    )

    # Explicit ids leave the PostgreSQL sequence behind; move it past the seeds.
    if op.get_bind().dialect.name == "postgresql":
        op.execute("SELECT setval(pg_get_serial_sequence('villas', 'id'), (SELECT MAX(id) FROM villas))")


def downgrade() -> None:
    op.execute(villas.delete().where(villas.c.id.in_([1, 2])))
