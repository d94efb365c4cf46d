"""
Brewery Backend — Customer SQLAlchemy Model
=============================================

What:  ORM model representing the `customer` table.
Who:   Used by CustomerRepository and Alembic.
"""

from datetime import datetime

from sqlalchemy import Integer, String, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column

from brewery.database import Base
from brewery.models.beer import utcnow


class Customer(Base):

    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Length 3–255 is enforced at the API boundary; the column only caps it
    customer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

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
        return f"<Customer(id={self.id}, customer_name='{self.customer_name}')>"
