# rentdesk/views.py
"""
Row -> DTO mapping at the serialization boundary.

Storage rows never leave a handler directly; each router passes them through
one of these functions, which decide what the client sees (ids as strings,
camelCase via the schema aliases, password hashes dropped, related records
embedded).
"""
from __future__ import annotations

from typing import Iterable, Optional

from .models import (
    House,
    MaintenanceIssue,
    MaintenanceRequest,
    MonthlyService,
    Payment,
    Rent,
    Room,
    Tenant,
    User,
)
from .schemas import (
    HouseOut,
    HouseRef,
    MaintenanceIssueOut,
    MaintenanceRequestOut,
    MonthlyServiceOut,
    MonthlyServiceRoom,
    PaymentOut,
    RentOut,
    RoomOut,
    RoomRef,
    TenantOut,
    UserOut,
)


def house_ref(row: House) -> HouseRef:
    return HouseRef.model_validate(row)


def room_ref(row: Room) -> RoomRef:
    return RoomRef.model_validate(row)


def house_out(row: House, rooms: Iterable[Room] = ()) -> HouseOut:
    return HouseOut(**house_ref(row).model_dump(), rooms=[room_ref(r) for r in rooms])


def room_out(row: Room, house: Optional[House] = None) -> RoomOut:
    return RoomOut(**room_ref(row).model_dump(), house=house_ref(house) if house is not None else None)


def tenant_out(row: Tenant) -> TenantOut:
    return TenantOut.model_validate(row)


def issue_out(row: MaintenanceIssue) -> MaintenanceIssueOut:
    return MaintenanceIssueOut.model_validate(row)


def request_out(row: MaintenanceRequest, issues: Iterable[MaintenanceIssue] = ()) -> MaintenanceRequestOut:
    return MaintenanceRequestOut(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        tenant_id=row.tenant_id,
        room_id=row.room_id,
        issue_ids=list(row.issue_ids or []),
        total_price=row.total_price,
        status=row.status,
        notes=row.notes,
        issues=[issue_out(i) for i in issues],
    )


def rent_out(row: Rent) -> RentOut:
    return RentOut.model_validate(row)


def monthly_service_out(
    row: MonthlyService,
    room: Optional[Room] = None,
    house: Optional[House] = None,
) -> MonthlyServiceOut:
    room_dto = None
    if room is not None:
        room_dto = MonthlyServiceRoom(
            **room_ref(room).model_dump(),
            house=house_ref(house) if house is not None else None,
        )
    out = MonthlyServiceOut.model_validate(row)
    return out.model_copy(update={"room": room_dto})


def payment_out(row: Payment, tenant: Optional[Tenant] = None) -> PaymentOut:
    out = PaymentOut.model_validate(row)
    return out.model_copy(update={"tenant": tenant_out(tenant) if tenant is not None else None})


def user_out(row: User) -> UserOut:
    # UserOut has no password field, so the hash never makes it out
    return UserOut.model_validate(row)


def session_record(row: User) -> dict:
    """The user record stored in the session cookie after login."""
    return {
        "id": str(row.id),
        "username": row.username,
        "fullname": row.fullname,
        "type": row.type,
        "status": row.status,
        "profile": row.profile,
    }
