import uuid
import logging
from sqlalchemy import func
from sqlalchemy.orm import Session

from raeesa_tours.core.dates import parse_date, parse_display_date
from raeesa_tours.models.registration import Registration
from raeesa_tours.schemas.registration import RegistrationCreate
from raeesa_tours.services.pagination import paginate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "firstName", "lastName", "email", "phone", "destination",
    "departureDate", "returnDate", "adults",
    "streetAddress", "city", "stateProvince", "postalCode", "country",
)


class RegistrationRejected(ValueError):
    """Raised for a booking the API refuses to store; the message is user-facing."""


def missing_required(body: RegistrationCreate) -> list[str]:
    missing = [f for f in REQUIRED_FIELDS if not str(getattr(body, f) or "").strip()]
    ec = body.emergencyContact
    for f in ("name", "phone", "relation"):
        if not (getattr(ec, f) or "").strip():
            missing.append(f"emergencyContact.{f}")
    return missing


def create_registration(db: Session, body: RegistrationCreate) -> Registration:
    missing = missing_required(body)
    if missing:
        logger.info("registration rejected, missing fields: %s", ", ".join(missing))
        raise RegistrationRejected("Please fill in all required fields")
    if not body.termsAccepted:
        raise RegistrationRejected("Please accept the terms and conditions")

    r = Registration(
        id=str(uuid.uuid4()),
        first_name=body.firstName.strip(),
        last_name=body.lastName.strip(),
        email=body.email.strip().lower(),
        phone=body.phone.strip(),
        destination=body.destination.strip(),
        departure_date=body.departureDate.strip(),
        return_date=body.returnDate.strip(),
        departure_on=parse_display_date(body.departureDate.strip()),
        adults=body.adults,
        children=body.children or "0",
        room_type=body.roomType,
        meal_preference=body.mealPreference,
        special_requests=(body.specialRequests or "").strip(),
        emergency_name=body.emergencyContact.name.strip(),
        emergency_phone=body.emergencyContact.phone.strip(),
        emergency_relation=body.emergencyContact.relation.strip(),
        street_address=body.streetAddress.strip(),
        city=body.city.strip(),
        state_province=body.stateProvince.strip(),
        postal_code=body.postalCode.strip(),
        country=body.country.strip(),
        terms_accepted=True,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    logger.info("registration %s created for %s", r.id, r.destination)
    return r


def list_registrations(db: Session, page: int, limit: int, destination: str | None = None,
                       start_date: str | None = None, end_date: str | None = None) -> tuple[list[Registration], dict]:
    q = db.query(Registration)
    if destination:
        q = q.filter(func.lower(Registration.destination).contains(destination.lower(), autoescape=True))
    if start_date:
        start = parse_date(start_date)
        if start is None:
            raise RegistrationRejected("startDate must be DD/MM/YYYY or YYYY-MM-DD")
        q = q.filter(Registration.departure_on >= start)
    if end_date:
        end = parse_date(end_date)
        if end is None:
            raise RegistrationRejected("endDate must be DD/MM/YYYY or YYYY-MM-DD")
        q = q.filter(Registration.departure_on <= end)
    return paginate(q, page, limit, Registration.created_at.desc(), Registration.id.desc())


def delete_registration(db: Session, registration_id: str) -> bool:
    r = db.get(Registration, registration_id)
    if not r:
        return False
    db.delete(r)
    db.commit()
    logger.info("registration %s deleted", registration_id)
    return True


def registration_to_dict(r: Registration) -> dict:
    return {
        "_id": r.id,
        "firstName": r.first_name,
        "lastName": r.last_name,
        "email": r.email,
        "phone": r.phone,
        "destination": r.destination,
        "departureDate": r.departure_date,
        "returnDate": r.return_date,
        "adults": r.adults,
        "children": r.children,
        "roomType": r.room_type,
        "mealPreference": r.meal_preference,
        "specialRequests": r.special_requests or "",
        "emergencyContact": {
            "name": r.emergency_name,
            "phone": r.emergency_phone,
            "relation": r.emergency_relation,
        },
        "streetAddress": r.street_address,
        "city": r.city,
        "stateProvince": r.state_province,
        "postalCode": r.postal_code,
        "country": r.country,
        "termsAccepted": r.terms_accepted,
        "createdAt": r.created_at.isoformat() if r.created_at else None,
        "updatedAt": r.updated_at.isoformat() if r.updated_at else None,
    }
