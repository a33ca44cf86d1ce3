import os, time
from urllib.parse import urlparse

DATABASE_URL = os.getenv("DATABASE_URL") or os.getenv("SQLALCHEMY_DATABASE_URI") or ""

if DATABASE_URL.startswith(("postgres://", "postgresql")):
    import psycopg2

    # SQLAlchemy URL may start with postgresql+psycopg2://
    url = DATABASE_URL.replace("postgresql+psycopg2://", "postgresql://").replace("postgres://", "postgresql://")
    p = urlparse(url)

    host = p.hostname or "db"
    port = p.port or 5432
    user = p.username or "raeesa"
    password = p.password or "raeesa"
    dbname = (p.path or "/raeesa_tours").lstrip("/") or "raeesa_tours"

    timeout_s = int(os.getenv("DB_WAIT_TIMEOUT", "60"))
    start = time.time()
    last_err = None

    print(f"[wait_for_db] Waiting for Postgres at {host}:{port} db={dbname} user={user} (timeout={timeout_s}s)")
    while True:
        try:
            conn = psycopg2.connect(host=host, port=port, user=user, password=password, dbname=dbname)
            conn.close()
            print("[wait_for_db] Postgres is ready.")
            break
        except psycopg2.OperationalError as e:
            last_err = e
            if time.time() - start > timeout_s:
                print(f"[wait_for_db] Timed out waiting for DB. Last error: {last_err}")
                raise
            time.sleep(1)
else:
    print("[wait_for_db] Not a Postgres DATABASE_URL; nothing to wait for.")
