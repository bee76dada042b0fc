# rentdesk/domain/ledger.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class LedgerResult:
    total_due: float
    previously_paid: float
    total_paid: float
    balance: float
    status: str  # Paid|Partial|Pending


def total_due(monthly_rent: float, service_total: Optional[float] = None) -> float:
    return float(monthly_rent or 0.0) + float(service_total or 0.0)


def sum_paid(payments: Iterable[Any]) -> float:
    return float(sum(float(getattr(p, "paid_amount", 0.0) or 0.0) for p in payments))


def status_for(balance: float, total_paid: float) -> str:
    if balance <= 0:
        return "Paid"
    if total_paid > 0:
        return "Partial"
    return "Pending"


def settle_payment(
    *,
    monthly_rent: float,
    paid_amount: float,
    previous_payments: Iterable[Any],
    service_total: Optional[float] = None,
) -> LedgerResult:
    """
    Balance after this payment: what is due for the period minus everything
    paid towards it so far, this payment included. Status follows the balance;
    whatever status the client sent is ignored.
    """
    due = total_due(monthly_rent, service_total)
    prev = sum_paid(previous_payments)
    paid = prev + float(paid_amount or 0.0)
    balance = due - paid
    return LedgerResult(
        total_due=float(due),
        previously_paid=float(prev),
        total_paid=float(paid),
        balance=float(balance),
        status=status_for(balance, paid),
    )
