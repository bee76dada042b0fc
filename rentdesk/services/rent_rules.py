# rentdesk/services/rent_rules.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..errors import ValidationFailure
from ..models import Rent

OVERLAP_MESSAGE = (
    "This room is already rented for the selected period. "
    "Please choose a different room or adjust the dates."
)


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """
    Half-open overlap: a rent ending on the day the next one starts is fine.
    """
    return a_start < b_end and a_end > b_start


def ensure_no_rent_overlap(
    db: Session,
    *,
    room_id: str,
    start_date: datetime,
    end_date: datetime,
    ignore_rent_id: Optional[str] = None,
) -> None:
    """Raise ValidationFailure if the room already has a rent in the period."""
    q = select(Rent).where(Rent.room_id == str(room_id))
    if ignore_rent_id is not None:
        q = q.where(Rent.id != str(ignore_rent_id))

    for r in db.scalars(q).all():
        if overlaps(start_date, end_date, r.start_date, r.end_date):
            raise ValidationFailure(OVERLAP_MESSAGE)
