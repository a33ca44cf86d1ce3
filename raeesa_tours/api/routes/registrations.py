import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from raeesa_tours.api.deps import require_admin
from raeesa_tours.db.session import get_db
from raeesa_tours.models.registration import Registration
from raeesa_tours.models.user import User
from raeesa_tours.schemas.registration import RegistrationCreate
from raeesa_tours.services.pagination import clamp_page
from raeesa_tours.services.registration_service import (
    RegistrationRejected,
    create_registration,
    delete_registration,
    list_registrations,
    registration_to_dict,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["registrations"])


@router.get("/registrations")
def get_registrations(page: int = 1, limit: int | None = None, destination: str | None = None,
                      startDate: str | None = None, endDate: str | None = None,
                      db: Session = Depends(get_db),
                      me: User = Depends(require_admin)):
    """Newest first. `destination` is a case-insensitive substring; dates filter departure, inclusive."""
    page, limit = clamp_page(page, limit)
    try:
        rows, pagination = list_registrations(db, page, limit, destination, startDate, endDate)
    except RegistrationRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "data": [registration_to_dict(r) for r in rows], "pagination": pagination}


@router.post("/registrations", status_code=201)
def post_registration(body: RegistrationCreate, db: Session = Depends(get_db)):
    try:
        r = create_registration(db, body)
    except RegistrationRejected as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError:
        db.rollback()
        logger.exception("storing registration failed")
        raise HTTPException(status_code=400, detail="Error creating registration")
    return {"success": True, "data": registration_to_dict(r)}


@router.get("/registrations/{registration_id}")
def get_registration(registration_id: str, db: Session = Depends(get_db),
                     me: User = Depends(require_admin)):
    r = db.get(Registration, registration_id)
    if not r:
        raise HTTPException(status_code=404, detail="Registration not found")
    return {"success": True, "data": registration_to_dict(r)}


@router.delete("/registrations/{registration_id}")
def remove_registration(registration_id: str, db: Session = Depends(get_db),
                        me: User = Depends(require_admin)):
    if not delete_registration(db, registration_id):
        raise HTTPException(status_code=404, detail="Registration not found")
    logger.info("registration %s deleted by %s", registration_id, me.email)
    return {"success": True, "message": "Registration deleted successfully"}
