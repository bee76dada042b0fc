# rentdesk/shell.py
"""Admin chrome: sidebar menu, header and the loading placeholder."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Optional


@dataclass(frozen=True)
class NavItem:
    title: str
    href: str
    icon: str


MENU: tuple[NavItem, ...] = (
    NavItem("Dashboard", "/admin", "layout-dashboard"),
    NavItem("Properties", "/admin/properties", "home"),
    NavItem("Tenants", "/admin/tenants", "users"),
    NavItem("Rents", "/admin/rents", "receipt"),
    NavItem("Monthly Services", "/admin/monthly-services", "droplet"),
    NavItem("Payments", "/admin/payments", "credit-card"),
    NavItem("Maintenance", "/admin/maintenance", "wrench"),
    NavItem("Reports", "/admin/reports", "bar-chart-3"),
    NavItem("Users", "/admin/users", "user-cog"),
)

LOADING = {"message": "Loading...", "size": "md"}


def is_active(item: NavItem, path: str) -> bool:
    # Dashboard only matches itself, otherwise every admin page would light it up
    if item.href == "/admin":
        return path.rstrip("/") == "/admin"
    return path == item.href or path.startswith(item.href + "/")


def navigation(path: str = "/admin") -> list[dict[str, Any]]:
    return [{**asdict(item), "active": is_active(item, path)} for item in MENU]


def decorate(user: dict[str, Any], path: str = "/admin", content: Optional[Any] = None) -> dict[str, Any]:
    return {
        "nav": navigation(path),
        "header": {
            "user": {
                "id": user.get("id"),
                "fullname": user.get("fullname"),
                "username": user.get("username"),
                "profile": user.get("profile"),
            },
            "logoutUrl": "/api/auth/logout",
        },
        "content": content,
        "loading": dict(LOADING),
    }
