#!/usr/bin/env python3
"""
Container entrypoint for the Raeesa Tours API: wait for Postgres, migrate,
seed the admin account, then hand the process over to uvicorn.
"""
import os
import sys

HERE = os.path.dirname(os.path.abspath(__file__))


def migrate() -> None:
    from alembic import command
    from alembic.config import Config
    from raeesa_tours.core.config import settings

    cfg = Config(os.path.join(HERE, "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    print("[start_api] applying migrations")
    command.upgrade(cfg, "head")


def seed() -> None:
    from raeesa_tours.seed import run

    run()


def serve() -> None:
    port = os.getenv("PORT", "8000")
    print(f"[start_api] starting uvicorn on :{port}")
    os.execv(
        sys.executable,
        [sys.executable, "-m", "uvicorn", "raeesa_tours.main:app", "--host", "0.0.0.0", "--port", port],
    )


if __name__ == "__main__":
    import wait_for_db  # noqa: F401  (blocks until Postgres answers)

    migrate()
    seed()
    serve()
