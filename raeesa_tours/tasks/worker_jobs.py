import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import OperationalError, ProgrammingError
from raeesa_tours.db.session import SessionLocal
from raeesa_tours.services.email_service import process_pending_emails

logger = logging.getLogger(__name__)


def process_email_queue(limit: int = 50, db: Session | None = None) -> dict:
    """Process queued/failed emails (retry send). Run periodically via Celery beat."""
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        try:
            result = process_pending_emails(db, limit=limit)
        except (ProgrammingError, OperationalError):
            # DB not migrated yet; don't crash the worker.
            db.rollback()
            return {"skipped": True, "reason": "missing_tables"}
        if result["processed"]:
            logger.info("email queue: %s", result)
        return result
    finally:
        if own_session:
            db.close()
