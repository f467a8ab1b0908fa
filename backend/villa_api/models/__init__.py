"""SQLAlchemy models for the Magic Villa API.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from villa_api.models.villa import Villa

__all__ = [
    "Villa",
]
