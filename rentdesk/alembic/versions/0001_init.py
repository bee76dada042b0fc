"""init schema

Revision ID: 0001_init
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa


revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def _stamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("fullname", sa.String(length=160), nullable=False),
        sa.Column("username", sa.String(length=80), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=40), nullable=False),
        sa.Column("status", sa.String(length=40), nullable=False),
        sa.Column("profile", sa.Text(), nullable=True),
        *_stamps(),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "houses",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_stamps(),
    )

    op.create_table(
        "rooms",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("monthly_rent", sa.Float(), nullable=False),
        sa.Column("house_id", sa.String(length=32), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="available"),
        *_stamps(),
        sa.CheckConstraint("monthly_rent > 0", name="ck_rooms_monthly_rent_positive"),
        sa.CheckConstraint("status IN ('available', 'rented')", name="ck_rooms_status"),
    )
    op.create_index("ix_rooms_house_id", "rooms", ["house_id"])

    op.create_table(
        "tenants",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("profile", sa.Text(), nullable=True),
        *_stamps(),
    )

    op.create_table(
        "maintenance_issues",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=False),
        *_stamps(),
        sa.CheckConstraint("price >= 0", name="ck_maintenance_issues_price"),
    )

    op.create_table(
        "maintenance_requests",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("tenant_id", sa.String(length=32), nullable=True),
        sa.Column("room_id", sa.String(length=32), nullable=True),
        sa.Column("issue_ids", sa.JSON(), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="Pending"),
        sa.Column("notes", sa.Text(), nullable=True),
        *_stamps(),
        sa.CheckConstraint("total_price >= 0", name="ck_maintenance_requests_total_price"),
        sa.CheckConstraint(
            "status IN ('Pending', 'In Progress', 'Completed', 'Cancelled')",
            name="ck_maintenance_requests_status",
        ),
    )
    op.create_index("ix_maintenance_requests_tenant_id", "maintenance_requests", ["tenant_id"])
    op.create_index("ix_maintenance_requests_room_id", "maintenance_requests", ["room_id"])

    op.create_table(
        "rents",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("room_id", sa.String(length=32), nullable=False),
        sa.Column("tenant_id", sa.String(length=32), nullable=False),
        sa.Column("guarantor_name", sa.String(length=160), nullable=False),
        sa.Column("guarantor_phone", sa.String(length=40), nullable=False),
        sa.Column("monthly_rent", sa.Float(), nullable=False),
        sa.Column("months", sa.Integer(), nullable=False),
        sa.Column("total_rent", sa.Float(), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("contract", sa.Text(), nullable=True),
        *_stamps(),
        sa.CheckConstraint("months >= 1 AND months <= 12", name="ck_rents_months"),
    )
    op.create_index("ix_rents_room_id", "rents", ["room_id"])
    op.create_index("ix_rents_tenant_id", "rents", ["tenant_id"])

    op.create_table(
        "monthly_services",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("room_id", sa.String(length=32), nullable=False),
        sa.Column("month", sa.String(length=7), nullable=False),
        sa.Column("water_previous", sa.Float(), nullable=True),
        sa.Column("water_current", sa.Float(), nullable=True),
        sa.Column("water_price_per_unit", sa.Float(), nullable=True),
        sa.Column("water_total", sa.Float(), nullable=True),
        sa.Column("electricity_previous", sa.Float(), nullable=True),
        sa.Column("electricity_current", sa.Float(), nullable=True),
        sa.Column("electricity_price_per_unit", sa.Float(), nullable=True),
        sa.Column("electricity_total", sa.Float(), nullable=True),
        sa.Column("trash_fee", sa.Float(), nullable=True),
        sa.Column("maintenance_fee", sa.Float(), nullable=True),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_stamps(),
        sa.UniqueConstraint("room_id", "month", name="uq_monthly_services_room_month"),
    )
    op.create_index("ix_monthly_services_room_id", "monthly_services", ["room_id"])

    op.create_table(
        "payments",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("tenant_id", sa.String(length=32), nullable=False),
        sa.Column("monthly_rent", sa.Float(), nullable=False),
        sa.Column("paid_amount", sa.Float(), nullable=False),
        sa.Column("balance", sa.Float(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("payment_date", sa.DateTime(), nullable=False),
        sa.Column("monthly_service_id", sa.String(length=32), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_stamps(),
        sa.CheckConstraint("monthly_rent >= 0", name="ck_payments_monthly_rent"),
        sa.CheckConstraint("paid_amount >= 0", name="ck_payments_paid_amount"),
        sa.CheckConstraint(
            "status IN ('Paid', 'Partial', 'Pending', 'Overdue')",
            name="ck_payments_status",
        ),
    )
    op.create_index("ix_payments_tenant_id", "payments", ["tenant_id"])
    op.create_index("ix_payments_payment_date", "payments", ["payment_date"])
    op.create_index("ix_payments_monthly_service_id", "payments", ["monthly_service_id"])


def downgrade():
    op.drop_table("payments")
    op.drop_table("monthly_services")
    op.drop_table("rents")
    op.drop_table("maintenance_requests")
    op.drop_table("maintenance_issues")
    op.drop_table("tenants")
    op.drop_table("rooms")
    op.drop_table("houses")
    op.drop_table("users")
