# rentdesk/schemas.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, List

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel


RoomStatus = Literal["available", "rented"]
RequestStatus = Literal["Pending", "In Progress", "Completed", "Cancelled"]
PaymentStatus = Literal["Paid", "Partial", "Pending", "Overdue"]


def _naive_utc(v: datetime) -> datetime:
    # stored columns are naive UTC; keep comparisons between like values
    if v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


UtcDatetime = Annotated[datetime, AfterValidator(_naive_utc)]


def _iso_utc(v: datetime) -> str:
    # 2026-01-01T00:00:00.000Z, millisecond precision
    v = _naive_utc(v)
    return v.strftime("%Y-%m-%dT%H:%M:%S.") + f"{v.microsecond // 1000:03d}Z"


UtcStamp = Annotated[datetime, PlainSerializer(_iso_utc, return_type=str, when_used="json")]


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RecordOut(ApiModel):
    id: str
    created_at: UtcStamp
    updated_at: UtcStamp


# -------------------- Houses / Rooms --------------------

class HouseCreate(ApiModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    description: Optional[str] = None


class RoomCreate(ApiModel):
    name: str = Field(min_length=1)
    monthly_rent: float = Field(gt=0)
    house_id: str = Field(min_length=1)
    status: Optional[RoomStatus] = None


class HouseRef(RecordOut):
    name: str
    address: str
    description: Optional[str] = None


class RoomRef(RecordOut):
    name: str
    monthly_rent: float
    house_id: str
    status: str


class HouseOut(HouseRef):
    rooms: List[RoomRef] = Field(default_factory=list)


class RoomOut(RoomRef):
    house: Optional[HouseRef] = None


# -------------------- Tenants --------------------

class TenantCreate(ApiModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    profile: Optional[str] = None


class TenantOut(RecordOut):
    name: str
    phone: str
    address: str
    profile: Optional[str] = None


# -------------------- Maintenance --------------------

class MaintenanceIssueCreate(ApiModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)


class MaintenanceIssueOut(RecordOut):
    name: str
    description: Optional[str] = None
    price: float


class MaintenanceRequestCreate(ApiModel):
    tenant_id: Optional[str] = None
    room_id: Optional[str] = None
    issue_ids: List[str] = Field(min_length=1)
    notes: Optional[str] = None


class MaintenanceRequestUpdate(ApiModel):
    tenant_id: Optional[str] = None
    room_id: Optional[str] = None
    issue_ids: Optional[List[str]] = None
    status: Optional[RequestStatus] = None
    notes: Optional[str] = None


class MaintenanceRequestOut(RecordOut):
    tenant_id: Optional[str] = None
    room_id: Optional[str] = None
    issue_ids: List[str]
    total_price: float = Field(ge=0)
    status: RequestStatus
    notes: Optional[str] = None
    issues: List[MaintenanceIssueOut] = Field(default_factory=list)


# -------------------- Rents / Monthly services --------------------

class RentCreate(ApiModel):
    room_id: str = Field(min_length=1)
    tenant_id: str = Field(min_length=1)
    guarantor_name: str = Field(min_length=1)
    guarantor_phone: str = Field(min_length=1)
    monthly_rent: float = Field(gt=0)
    months: int = Field(ge=1, le=12)
    total_rent: float = Field(gt=0)
    start_date: UtcDatetime
    end_date: UtcDatetime
    contract: Optional[str] = None

    @model_validator(mode="after")
    def _dates_in_order(self) -> "RentCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate cannot be before startDate")
        return self


class RentOut(RecordOut):
    room_id: str
    tenant_id: str
    guarantor_name: str
    guarantor_phone: str
    monthly_rent: float
    months: int
    total_rent: float
    start_date: UtcStamp
    end_date: UtcStamp
    contract: Optional[str] = None


class MonthlyServiceCreate(ApiModel):
    room_id: str = Field(min_length=1)
    month: str = Field(pattern=r"^\d{4}-(0[1-9]|1[0-2])$")

    water_previous: Optional[float] = Field(default=None, ge=0)
    water_current: Optional[float] = Field(default=None, ge=0)
    water_price_per_unit: Optional[float] = Field(default=None, ge=0)
    water_total: Optional[float] = Field(default=None, ge=0)

    electricity_previous: Optional[float] = Field(default=None, ge=0)
    electricity_current: Optional[float] = Field(default=None, ge=0)
    electricity_price_per_unit: Optional[float] = Field(default=None, ge=0)
    electricity_total: Optional[float] = Field(default=None, ge=0)

    trash_fee: Optional[float] = Field(default=None, ge=0)
    maintenance_fee: Optional[float] = Field(default=None, ge=0)
    total_amount: float = Field(ge=0)
    notes: Optional[str] = None


class MonthlyServiceRoom(RoomRef):
    house: Optional[HouseRef] = None


class MonthlyServiceOut(RecordOut):
    room_id: str
    month: str
    water_previous: Optional[float] = None
    water_current: Optional[float] = None
    water_price_per_unit: Optional[float] = None
    water_total: Optional[float] = None
    electricity_previous: Optional[float] = None
    electricity_current: Optional[float] = None
    electricity_price_per_unit: Optional[float] = None
    electricity_total: Optional[float] = None
    trash_fee: Optional[float] = None
    maintenance_fee: Optional[float] = None
    total_amount: float
    notes: Optional[str] = None
    room: Optional[MonthlyServiceRoom] = None


# -------------------- Payments --------------------

class PaymentCreate(ApiModel):
    tenant_id: str = Field(min_length=1)
    monthly_rent: float = Field(ge=0)  # 0 allowed for service-only payments
    paid_amount: float = Field(ge=0)
    balance: float
    status: PaymentStatus
    payment_date: UtcDatetime
    monthly_service_id: Optional[str] = None
    notes: Optional[str] = None


class PaymentOut(RecordOut):
    tenant_id: str
    monthly_rent: float
    paid_amount: float
    balance: float
    status: str
    payment_date: UtcStamp
    monthly_service_id: Optional[str] = None
    notes: Optional[str] = None
    tenant: Optional[TenantOut] = None


# -------------------- Users / Auth --------------------

class UserCreate(ApiModel):
    fullname: str = Field(min_length=1)
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    type: str = Field(min_length=1)
    status: str = Field(min_length=1)
    profile: Optional[str] = None


class UserUpdate(ApiModel):
    fullname: str = Field(min_length=1)
    username: str = Field(min_length=3)
    password: Optional[str] = Field(default=None, min_length=6)
    type: str = Field(min_length=1)
    status: str = Field(min_length=1)
    profile: Optional[str] = None


class UserOut(RecordOut):
    fullname: str
    username: str
    type: str
    status: str
    profile: Optional[str] = None


class MessageOut(BaseModel):
    message: str


# -------------------- Uploads --------------------

class UploadedFileOut(BaseModel):
    url: str
    key: str
    name: str
    size: int
