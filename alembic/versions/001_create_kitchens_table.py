"""create kitchens table

Revision ID: 001
Revises:
Create Date: 2026-10-12 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "kitchens",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(60), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_kitchens_name"),
    )
    op.create_index("ix_kitchens_id", "kitchens", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_kitchens_id", table_name="kitchens")
    op.drop_table("kitchens")
