import uuid
import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from raeesa_tours.models.contact_message import ContactMessage, CONTACT_STATUSES
from raeesa_tours.schemas.contact import ContactCreate, ContactUpdate
from raeesa_tours.services.pagination import paginate

logger = logging.getLogger(__name__)


class ContactRejected(ValueError):
    pass


def create_contact(db: Session, body: ContactCreate) -> ContactMessage:
    if not all((v or "").strip() for v in (body.name, body.email, body.subject, body.message)):
        raise ContactRejected("Please fill in all required fields")
    c = ContactMessage(
        id=str(uuid.uuid4()),
        name=body.name.strip(),
        email=body.email.strip().lower(),
        subject=body.subject.strip(),
        message=body.message.strip(),
        status="new",
        admin_notes="",
    )
    db.add(c)
    db.commit()
    db.refresh(c)
    logger.info("contact message %s received", c.id)
    return c


def list_contacts(db: Session, page: int, limit: int, status: str | None = None) -> tuple[list[ContactMessage], dict]:
    q = db.query(ContactMessage)
    if status:
        if status not in CONTACT_STATUSES:
            raise ContactRejected("invalid status")
        q = q.filter(ContactMessage.status == status)
    return paginate(q, page, limit, ContactMessage.created_at.desc(), ContactMessage.id.desc())


def update_contact(db: Session, contact_id: str, body: ContactUpdate) -> ContactMessage | None:
    c = db.get(ContactMessage, contact_id)
    if not c:
        return None
    if body.status is not None:
        c.status = body.status
    if body.adminNotes is not None:
        c.admin_notes = body.adminNotes
    c.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(c)
    return c


def delete_contact(db: Session, contact_id: str) -> bool:
    c = db.get(ContactMessage, contact_id)
    if not c:
        return False
    db.delete(c)
    db.commit()
    return True


def contact_to_dict(c: ContactMessage) -> dict:
    return {
        "_id": c.id,
        "name": c.name,
        "email": c.email,
        "subject": c.subject,
        "message": c.message,
        "status": c.status,
        "adminNotes": c.admin_notes or "",
        "createdAt": c.created_at.isoformat() if c.created_at else None,
        "updatedAt": c.updated_at.isoformat() if c.updated_at else None,
    }
