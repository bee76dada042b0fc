# rentdesk/routers/payments.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..auth import require_session
from ..db import get_db
from ..errors import validate_payload
from ..models import Payment, Tenant
from ..schemas import MessageOut, PaymentCreate, PaymentOut
from ..services.lookups import maybe_get, must_get_payment
from ..services.payment_ledger import ledger_for
from ..views import payment_out

log = logging.getLogger("rentdesk.payments")

router = APIRouter(prefix="/payments", tags=["payments"], dependencies=[Depends(require_session)])


def _apply(row: Payment, data: PaymentCreate, balance: float, status: str) -> None:
    row.tenant_id = data.tenant_id
    row.monthly_rent = data.monthly_rent
    row.paid_amount = data.paid_amount
    row.balance = balance
    row.status = status
    row.payment_date = data.payment_date
    row.monthly_service_id = data.monthly_service_id or None
    row.notes = data.notes or None


@router.get("", response_model=list[PaymentOut])
def list_payments(db: Session = Depends(get_db)):
    rows = db.scalars(select(Payment).order_by(desc(Payment.payment_date))).all()
    tenants = {t.id: t for t in db.scalars(select(Tenant)).all()}
    return [payment_out(p, tenants.get(p.tenant_id)) for p in rows]


@router.post("", response_model=PaymentOut, status_code=201)
def create_payment(payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(PaymentCreate, payload)
    ledger = ledger_for(db, data)

    row = Payment()
    _apply(row, data, ledger.balance, ledger.status)
    db.add(row)
    db.commit()
    db.refresh(row)

    log.info(
        "payment recorded: due=%.2f paid=%.2f balance=%.2f",
        ledger.total_due,
        ledger.total_paid,
        ledger.balance,
        extra={"entity": "Payment", "entity_id": row.id},
    )
    return payment_out(row, maybe_get(db, Tenant, row.tenant_id))


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: str, db: Session = Depends(get_db)):
    row = must_get_payment(db, payment_id)
    return payment_out(row, maybe_get(db, Tenant, row.tenant_id))


@router.put("/{payment_id}", response_model=PaymentOut)
def update_payment(payment_id: str, payload: dict[str, Any], db: Session = Depends(get_db)):
    data = validate_payload(PaymentCreate, payload)
    row = must_get_payment(db, payment_id)

    # the payment being edited doesn't count as a previous payment
    ledger = ledger_for(db, data, exclude_payment_id=row.id)
    _apply(row, data, ledger.balance, ledger.status)

    db.add(row)
    db.commit()
    db.refresh(row)
    return payment_out(row, maybe_get(db, Tenant, row.tenant_id))


@router.delete("/{payment_id}", response_model=MessageOut)
def delete_payment(payment_id: str, db: Session = Depends(get_db)):
    row = must_get_payment(db, payment_id)
    db.delete(row)
    db.commit()
    return {"message": "Payment deleted successfully"}
