import uuid

from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError

from raeesa_tours.db.session import SessionLocal
from raeesa_tours.core.config import settings
from raeesa_tours.core.security import hash_password
from raeesa_tours.models.user import User


def ensure_user(db: Session, email: str, password: str, role: str, username: str) -> bool:
    """Create the user unless the email exists. Returns True when created."""
    email = email.strip().lower()
    u = db.query(User).filter(User.email == email).first()
    if u:
        return False
    db.add(
        User(
            id=str(uuid.uuid4()),
            email=email,
            username=username,
            role=role,
            password_hash=hash_password(password),
            is_active=True,
        )
    )
    db.commit()
    return True


def run(db=None):
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM users LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            print("[seed] users table not found yet. Skipping seeding (run alembic upgrade head).")
            return

        created = ensure_user(
            db,
            settings.ADMIN_SEED_EMAIL,
            settings.ADMIN_SEED_PASSWORD,
            "admin",
            settings.ADMIN_SEED_USERNAME,
        )
        if created:
            print(f"[seed] admin user created: {settings.ADMIN_SEED_EMAIL}")
            print("[seed] please change the password after first login")
        else:
            print("[seed] admin user already exists")
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    run()
