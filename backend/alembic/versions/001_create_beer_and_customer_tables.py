"""Create beer and customer tables

Revision ID: 001
Revises: None
Create Date: 2024-10-05 00:00:00.000000+00:00

What:  Creates the `beer` and `customer` tables.
How:   Integer identity primary keys, NUMERIC(10, 2) price, timezone-aware
       timestamps defaulting to CURRENT_TIMESTAMP.

Rollback: downgrade() drops both tables (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create both tables. Column docs live in brewery/models/."""
    op.create_table(
        "beer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("beer_name", sa.String(255), nullable=True),
        sa.Column("beer_style", sa.String(255), nullable=True),
        sa.Column("upc", sa.String(25), nullable=True),
        sa.Column("quantity_on_hand", sa.Integer(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
        sa.Column(
            "created_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.Column(
            "last_modified_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "customer",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_name", sa.String(255), nullable=True),
        sa.Column(
            "created_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.Column(
            "last_modified_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("customer")
    op.drop_table("beer")
