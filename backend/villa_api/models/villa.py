"""Villa model — a rentable property record."""

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from villa_api.database import Base, TimestampMixin


class Villa(TimestampMixin, Base):
    """A villa offered for rent.

    ``name`` is not unique at the store level; uniqueness is checked by the
    service before insert.
    """

    __tablename__ = "villas"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    image_url: Mapped[str | None] = mapped_column(String(512), default=None)
    occupancy: Mapped[int] = mapped_column(nullable=False, default=0)
    rate: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    area_sqm: Mapped[int] = mapped_column(nullable=False, default=0)
    amenities: Mapped[str | None] = mapped_column(String(1024), default=None)

    def __repr__(self) -> str:
        return f"<Villa(id={self.id}, name={self.name!r}, rate={self.rate!r})>"
