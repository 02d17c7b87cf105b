"""create restaurants table

Revision ID: 002
Revises: 001
Create Date: 2026-10-12 10:30:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "restaurants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(80), nullable=False),
        sa.Column("shipping_fee", sa.Numeric(10, 2), nullable=False),
        sa.Column("kitchen_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["kitchen_id"], ["kitchens.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_restaurants_id", "restaurants", ["id"], unique=False)
    op.create_index(
        "ix_restaurants_kitchen_id", "restaurants", ["kitchen_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_restaurants_kitchen_id", table_name="restaurants")
    op.drop_index("ix_restaurants_id", table_name="restaurants")
    op.drop_table("restaurants")
