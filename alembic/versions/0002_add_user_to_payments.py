"""add user_id and user_type to payments

Revision ID: 0002
Revises: 0001
Create Date: 2025-06-15
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column(
        "payments",
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
    )
    op.add_column("payments", sa.Column("user_type", sa.String(length=30), nullable=True))


def downgrade() -> None:
    op.drop_column("payments", "user_type")
    op.drop_column("payments", "user_id")
