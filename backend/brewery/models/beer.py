"""
Brewery Backend — Beer SQLAlchemy Model
=========================================

What:  ORM model representing the `beer` table.
Who:   Used by BeerRepository for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - Integer autoincrement primary key: assigned by the database on insert,
      never reassigned afterwards
    - price: NUMERIC(10, 2), read back as Decimal (no float rounding)
    - created_date / last_modified_date: written by the persistence layer;
      the API never copies client-supplied timestamps onto the entity
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column

from brewery.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Beer(Base):
    """
    Represents a beer in the catalogue.

    Lifecycle:
        nonexistent → created (POST) → updated (PUT/PATCH)* → deleted
    """

    __tablename__ = "beer"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    beer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # e.g. "Pale Ale", "IPA", "Stout"
    beer_style: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Universal Product Code
    upc: Mapped[str | None] = mapped_column(String(25), nullable=True)

    quantity_on_hand: Mapped[int | None] = mapped_column(Integer, nullable=True)

    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2, asdecimal=True),
        nullable=True,
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    # Python-side defaults are populated on the instance at flush time, so
    # the saved entity carries them without an extra round trip
    created_date: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True),
        default=utcnow,
        server_default=func.current_timestamp(),
    )

    last_modified_date: Mapped[datetime | None] = mapped_column(
        TIMESTAMP(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.current_timestamp(),
    )

    def __repr__(self) -> str:
        return f"<Beer(id={self.id}, beer_name='{self.beer_name}', upc='{self.upc}')>"
