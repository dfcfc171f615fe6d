"""create users, coaches, events and payments

Revision ID: 0001
Revises:
Create Date: 2025-04-01
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

ROLES = ("ADMIN", "STUDENT", "COACH", "INSTITUTE", "CLUB", "EVENT_INCHARGE")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=120), nullable=False, unique=True),
        sa.Column("role", sa.Enum(*ROLES, name="roleenum"), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_table(
        "coaches",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("name", sa.String(length=100), nullable=False),
    )
    op.create_table(
        "events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("created_by_admin", sa.Boolean(), server_default=sa.false(), nullable=True),
        sa.Column("event_fee", sa.Numeric(10, 2), nullable=True),
        sa.Column("student_fee_enabled", sa.Boolean(), server_default=sa.false(), nullable=True),
        sa.Column("student_fee_amount", sa.Numeric(10, 2), server_default="0", nullable=True),
    )
    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("coach_id", sa.Integer(), sa.ForeignKey("coaches.id"), nullable=True),
        sa.Column("payment_type", sa.String(length=50), nullable=True),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="PENDING"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("payments")
    op.drop_table("events")
    op.drop_table("coaches")
    op.drop_index("ix_users_id", table_name="users")
    op.drop_table("users")
    sa.Enum(name="roleenum").drop(op.get_bind(), checkfirst=True)
