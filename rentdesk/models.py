# rentdesk/models.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List, Optional

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    Float,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from .db import Base


ROOM_STATUSES = ("available", "rented")
REQUEST_STATUSES = ("Pending", "In Progress", "Completed", "Cancelled")
PAYMENT_STATUSES = ("Paid", "Partial", "Pending", "Overdue")


def new_id() -> str:
    return uuid.uuid4().hex


def _in(col: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join("'" + v + "'" for v in values)
    return f"{col} IN ({quoted})"


class TimestampMixin:
    """Generated id + createdAt/updatedAt shared by every record."""

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )


# -----------------------------
# Accounts
# -----------------------------
class User(TimestampMixin, Base):
    __tablename__ = "users"

    fullname: Mapped[str] = mapped_column(String(160), nullable=False)
    username: Mapped[str] = mapped_column(String(80), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(40), nullable=False)  # Admin|Staff|...
    status: Mapped[str] = mapped_column(String(40), nullable=False)  # Active|Inactive
    profile: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


# -----------------------------
# Properties
# -----------------------------
class House(TimestampMixin, Base):
    __tablename__ = "houses"

    name: Mapped[str] = mapped_column(String(160), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Room(TimestampMixin, Base):
    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("monthly_rent > 0", name="ck_rooms_monthly_rent_positive"),
        CheckConstraint(_in("status", ROOM_STATUSES), name="ck_rooms_status"),
    )

    name: Mapped[str] = mapped_column(String(160), nullable=False)
    monthly_rent: Mapped[float] = mapped_column(Float, nullable=False)
    # plain string reference; deleting a house leaves its rooms alone
    house_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="available")


class Tenant(TimestampMixin, Base):
    __tablename__ = "tenants"

    name: Mapped[str] = mapped_column(String(160), nullable=False)
    phone: Mapped[str] = mapped_column(String(40), nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    profile: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


# -----------------------------
# Maintenance
# -----------------------------
class MaintenanceIssue(TimestampMixin, Base):
    __tablename__ = "maintenance_issues"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_maintenance_issues_price"),)

    name: Mapped[str] = mapped_column(String(160), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[float] = mapped_column(Float, nullable=False)


class MaintenanceRequest(TimestampMixin, Base):
    __tablename__ = "maintenance_requests"
    __table_args__ = (
        CheckConstraint("total_price >= 0", name="ck_maintenance_requests_total_price"),
        CheckConstraint(_in("status", REQUEST_STATUSES), name="ck_maintenance_requests_status"),
    )

    tenant_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    room_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    issue_ids: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    total_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pending")
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


# -----------------------------
# Leasing / billing
# -----------------------------
class Rent(TimestampMixin, Base):
    __tablename__ = "rents"
    __table_args__ = (CheckConstraint("months >= 1 AND months <= 12", name="ck_rents_months"),)

    room_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    tenant_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    guarantor_name: Mapped[str] = mapped_column(String(160), nullable=False)
    guarantor_phone: Mapped[str] = mapped_column(String(40), nullable=False)
    monthly_rent: Mapped[float] = mapped_column(Float, nullable=False)
    months: Mapped[int] = mapped_column(Integer, nullable=False)
    total_rent: Mapped[float] = mapped_column(Float, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    contract: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class MonthlyService(TimestampMixin, Base):
    __tablename__ = "monthly_services"
    __table_args__ = (UniqueConstraint("room_id", "month", name="uq_monthly_services_room_month"),)

    room_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    month: Mapped[str] = mapped_column(String(7), nullable=False)  # YYYY-MM

    water_previous: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    water_current: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    water_price_per_unit: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    water_total: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    electricity_previous: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    electricity_current: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    electricity_price_per_unit: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    electricity_total: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    trash_fee: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    maintenance_fee: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Payment(TimestampMixin, Base):
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("monthly_rent >= 0", name="ck_payments_monthly_rent"),
        CheckConstraint("paid_amount >= 0", name="ck_payments_paid_amount"),
        CheckConstraint(_in("status", PAYMENT_STATUSES), name="ck_payments_status"),
    )

    tenant_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    monthly_rent: Mapped[float] = mapped_column(Float, nullable=False)
    paid_amount: Mapped[float] = mapped_column(Float, nullable=False)
    # stored as given; the payments ledger works it out before insert
    balance: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    payment_date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    monthly_service_id: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, index=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
