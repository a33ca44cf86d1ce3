import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from raeesa_tours.api.deps import require_admin
from raeesa_tours.db.session import get_db
from raeesa_tours.models.user import User
from raeesa_tours.schemas.contact import ContactCreate, ContactUpdate
from raeesa_tours.services.contact_service import (
    ContactRejected,
    contact_to_dict,
    create_contact,
    delete_contact,
    list_contacts,
    update_contact,
)
from raeesa_tours.services.email_service import notify_contact_received
from raeesa_tours.services.pagination import clamp_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])


@router.post("/contact", status_code=201)
def post_contact(body: ContactCreate, db: Session = Depends(get_db)):
    try:
        c = create_contact(db, body)
    except ContactRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    # email problems must not fail the submission; queue_email records them for retry
    notify_contact_received(db, c)
    return {"success": True, "message": "Message sent successfully!", "data": contact_to_dict(c)}


@router.get("/contact")
def get_contacts(page: int = 1, limit: int | None = None, status: str | None = None,
                 db: Session = Depends(get_db),
                 me: User = Depends(require_admin)):
    page, limit = clamp_page(page, limit)
    try:
        rows, pagination = list_contacts(db, page, limit, status)
    except ContactRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "data": [contact_to_dict(c) for c in rows], "pagination": pagination}


@router.patch("/contact/{contact_id}")
def patch_contact(contact_id: str, body: ContactUpdate, db: Session = Depends(get_db),
                  me: User = Depends(require_admin)):
    c = update_contact(db, contact_id, body)
    if not c:
        raise HTTPException(status_code=404, detail="Contact message not found")
    return {"success": True, "data": contact_to_dict(c)}


@router.delete("/contact/{contact_id}")
def remove_contact(contact_id: str, db: Session = Depends(get_db),
                   me: User = Depends(require_admin)):
    if not delete_contact(db, contact_id):
        raise HTTPException(status_code=404, detail="Contact message not found")
    logger.info("contact message %s deleted by %s", contact_id, me.email)
    return {"success": True, "message": "Contact message deleted successfully"}
