# rentdesk/domain/maintenance.py
from __future__ import annotations

from typing import Any, Iterable


def total_price(issues: Iterable[Any]) -> float:
    """Sum of issue prices; an issue listed twice is counted once."""
    seen: set[str] = set()
    total = 0.0
    for i in issues:
        iid = str(getattr(i, "id", ""))
        if iid in seen:
            continue
        seen.add(iid)
        total += float(getattr(i, "price", 0.0) or 0.0)
    return float(total)
