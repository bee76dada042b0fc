# rentdesk/cli/__main__.py
from __future__ import annotations

import argparse

from ..config import settings
from ..db import Database
from .seed_demo import seed_demo


def main() -> None:
    p = argparse.ArgumentParser(prog="python -m rentdesk.cli")
    p.add_argument("--database-url", default=settings.database_url)
    p.add_argument("--username", default="admin")
    p.add_argument("--password", default="admin123")
    p.add_argument("--fullname", default="Administrator")
    p.add_argument("--no-sample-house", action="store_true")
    args = p.parse_args()

    database = Database(args.database_url)
    try:
        out = seed_demo(
            database,
            username=args.username,
            password=args.password,
            fullname=args.fullname,
            create_sample_house=(not args.no_sample_house),
        )
    finally:
        database.dispose()

    print(
        {
            "ok": True,
            "username": out.username,
            "created_user": out.created_user,
            "sample_house_id": out.house_id,
        }
    )


if __name__ == "__main__":
    main()
