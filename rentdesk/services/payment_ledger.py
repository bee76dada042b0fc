# rentdesk/services/payment_ledger.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from ..domain.ledger import LedgerResult, settle_payment
from ..models import MonthlyService, Payment
from ..schemas import PaymentCreate


def previous_payments(
    db: Session,
    *,
    tenant_id: str,
    monthly_rent: float,
    monthly_service_id: Optional[str],
    exclude_payment_id: Optional[str] = None,
) -> list[Payment]:
    """
    Payments already counted towards the same period.

    With a monthly service: every payment of the tenant against that service.
    Without one: rent-only payments, plus any payment for the same monthly rent.
    """
    q = select(Payment).where(Payment.tenant_id == str(tenant_id))
    if exclude_payment_id is not None:
        q = q.where(Payment.id != str(exclude_payment_id))

    if monthly_service_id:
        q = q.where(Payment.monthly_service_id == str(monthly_service_id))
    else:
        q = q.where(or_(Payment.monthly_service_id.is_(None), Payment.monthly_rent == float(monthly_rent)))

    return list(db.scalars(q).all())


def ledger_for(
    db: Session,
    payload: PaymentCreate,
    *,
    exclude_payment_id: Optional[str] = None,
) -> LedgerResult:
    service_total = None
    if payload.monthly_service_id:
        service = db.scalar(select(MonthlyService).where(MonthlyService.id == payload.monthly_service_id))
        # unknown service ids are kept on the payment but add nothing to the amount due
        if service is not None:
            service_total = service.total_amount

    prev = previous_payments(
        db,
        tenant_id=payload.tenant_id,
        monthly_rent=payload.monthly_rent,
        monthly_service_id=payload.monthly_service_id,
        exclude_payment_id=exclude_payment_id,
    )
    return settle_payment(
        monthly_rent=payload.monthly_rent,
        paid_amount=payload.paid_amount,
        previous_payments=prev,
        service_total=service_total,
    )
