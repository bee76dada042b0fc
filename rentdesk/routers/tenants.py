# rentdesk/routers/tenants.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..errors import validate_payload
from ..models import Tenant
from ..schemas import MessageOut, TenantCreate, TenantOut
from ..services.lookups import must_get_tenant
from ..views import tenant_out

router = APIRouter(prefix="/tenants", tags=["tenants"], dependencies=[Depends(require_session)])


@router.get("", response_model=list[TenantOut])
def list_tenants(db: Session = Depends(get_db)):
    q = select(Tenant).order_by(desc(Tenant.created_at))
    return [tenant_out(t) for t in db.scalars(q).all()]


@router.post("", response_model=TenantOut, status_code=201)
def create_tenant(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(TenantCreate, payload)
    row = Tenant(name=data.name, phone=data.phone, address=data.address, profile=data.profile or None)
    db.add(row)
    db.commit()
    db.refresh(row)
    return tenant_out(row)


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(tenant_id: str, db: Session = Depends(get_db)):
    return tenant_out(must_get_tenant(db, tenant_id))


@router.put("/{tenant_id}", response_model=TenantOut)
def update_tenant(
    tenant_id: str,
    payload: dict[str, Any],  # full-update for simplicity
    db: Session = Depends(get_db),
):
    data = validate_payload(TenantCreate, payload)
    row = must_get_tenant(db, tenant_id)

    row.name = data.name
    row.phone = data.phone
    row.address = data.address
    row.profile = data.profile or None

    db.add(row)
    db.commit()
    db.refresh(row)
    return tenant_out(row)


@router.delete("/{tenant_id}", response_model=MessageOut)
def delete_tenant(tenant_id: str, db: Session = Depends(get_db)):
    row = must_get_tenant(db, tenant_id)
    db.delete(row)
    db.commit()
    return {"message": "Tenant deleted successfully"}
