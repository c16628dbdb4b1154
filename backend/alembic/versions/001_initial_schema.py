"""Initial schema: users, expert_profiles, services, availability, bookings.

bookings gets a partial unique index so at most one confirmed row exists per
(expert_id, booking_date, booking_time); cancelled rows do not block the slot.
"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("role", sa.String(16), nullable=False, server_default="user"),
        *_timestamps(),
    )
    op.create_table(
        "expert_profiles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("specialization", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_expert_profiles_user_id", "expert_profiles", ["user_id"], unique=True)
    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("expert_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("price > 0", name="ck_services_price_positive"),
        sa.CheckConstraint("duration > 0", name="ck_services_duration_positive"),
    )
    op.create_index("ix_services_expert_id", "services", ["expert_id"], unique=False)
    op.create_table(
        "availability",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("expert_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("start_time", sa.String(5), nullable=False),
        sa.Column("end_time", sa.String(5), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("day_of_week BETWEEN 0 AND 6", name="ck_availability_day_of_week"),
        sa.CheckConstraint("start_time < end_time", name="ck_availability_start_before_end"),
    )
    op.create_index("ix_availability_expert_day", "availability", ["expert_id", "day_of_week"], unique=False)
    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("expert_id", sa.String(64), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("service_id", sa.Integer(), sa.ForeignKey("services.id"), nullable=False),
        sa.Column("booking_date", sa.String(10), nullable=False),
        sa.Column("booking_time", sa.String(5), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="confirmed"),
        *_timestamps(),
    )
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"], unique=False)
    op.create_index("ix_bookings_expert_id", "bookings", ["expert_id"], unique=False)
    op.create_index(
        "uq_bookings_confirmed_slot",
        "bookings",
        ["expert_id", "booking_date", "booking_time"],
        unique=True,
        postgresql_where=sa.text("status = 'confirmed'"),
        sqlite_where=sa.text("status = 'confirmed'"),
    )


def downgrade() -> None:
    op.drop_index("uq_bookings_confirmed_slot", table_name="bookings")
    op.drop_index("ix_bookings_expert_id", table_name="bookings")
    op.drop_index("ix_bookings_user_id", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_availability_expert_day", table_name="availability")
    op.drop_table("availability")
    op.drop_index("ix_services_expert_id", table_name="services")
    op.drop_table("services")
    op.drop_index("ix_expert_profiles_user_id", table_name="expert_profiles")
    op.drop_table("expert_profiles")
    op.drop_table("users")
