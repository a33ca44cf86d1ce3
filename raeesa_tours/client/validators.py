"""Field validators for the booking and contact forms.

Every function here is pure: it reads the draft and returns messages, an
empty string meaning "valid". Full-form validation is built from the same
per-field checks, so validating one field on change always agrees with the
result for that field on submit.
"""
import re
from datetime import date
from typing import Callable

from raeesa_tours.client.dates import validate_date
from raeesa_tours.client.errors import ValidationErrors
from raeesa_tours.schemas.contact import ContactCreate
from raeesa_tours.schemas.registration import BookingDraft, DESTINATIONS, MEAL_PREFERENCES, ROOM_TYPES

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_RE = re.compile(r"\+?[\d\s-]{10,}")

MIN_NAME_LENGTH = 2
MIN_MESSAGE_LENGTH = 10


def required(value: str, label: str) -> str:
    if not (value or "").strip():
        return f"{label} is required"
    return ""


def validate_email(value: str) -> str:
    msg = required(value, "Email")
    if msg:
        return msg
    if not EMAIL_RE.fullmatch(value):
        return "Please enter a valid email address"
    return ""


def validate_phone(value: str, label: str = "Phone number") -> str:
    msg = required(value, label)
    if msg:
        return msg
    if not PHONE_RE.fullmatch(value):
        return "Please enter a valid phone number"
    return ""


def validate_name(value: str, label: str) -> str:
    msg = required(value, label)
    if msg:
        return msg
    if len(value.strip()) < MIN_NAME_LENGTH:
        return f"{label} must be at least {MIN_NAME_LENGTH} characters"
    return ""


def validate_destination(value: str) -> str:
    if not (value or "").strip() or value not in DESTINATIONS:
        return "Please select a destination"
    return ""


def validate_choice(value: str, choices: tuple[str, ...], message: str) -> str:
    if value not in choices:
        return message
    return ""


def _as_count(value) -> int | None:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def validate_adults(value: str) -> str:
    n = _as_count(value)
    if n is None or n < 1:
        return "Adults must be at least 1"
    return ""


def validate_children(value: str) -> str:
    n = _as_count(value)
    if n is None or n < 0:
        return "Children cannot be negative"
    return ""


# Booking form: field path -> check(draft, today). Order is display order.
BookingCheck = Callable[[BookingDraft, date | None], str]

BOOKING_CHECKS: dict[str, BookingCheck] = {
    "firstName": lambda d, t: validate_name(d.firstName, "First name"),
    "lastName": lambda d, t: validate_name(d.lastName, "Last name"),
    "email": lambda d, t: validate_email(d.email),
    "phone": lambda d, t: validate_phone(d.phone),
    "destination": lambda d, t: validate_destination(d.destination),
    "departureDate": lambda d, t: validate_date(d.departureDate, "Departure", today=t),
    "returnDate": lambda d, t: validate_date(d.returnDate, "Return", departure=d.departureDate, today=t),
    "adults": lambda d, t: validate_adults(d.adults),
    "children": lambda d, t: validate_children(d.children),
    "roomType": lambda d, t: validate_choice(d.roomType, ROOM_TYPES, "Please select a room type"),
    "mealPreference": lambda d, t: validate_choice(d.mealPreference, MEAL_PREFERENCES, "Please select a meal preference"),
    "emergencyContact.name": lambda d, t: required(d.emergencyContact.name, "Emergency contact name"),
    "emergencyContact.phone": lambda d, t: validate_phone(d.emergencyContact.phone, "Emergency contact phone"),
    "emergencyContact.relation": lambda d, t: required(d.emergencyContact.relation, "Relation"),
    "streetAddress": lambda d, t: required(d.streetAddress, "Street address"),
    "city": lambda d, t: required(d.city, "City"),
    "stateProvince": lambda d, t: required(d.stateProvince, "State/Province"),
    "postalCode": lambda d, t: required(d.postalCode, "Postal code"),
    "country": lambda d, t: required(d.country, "Country"),
}


def validate_booking_field(draft: BookingDraft, path: str, today: date | None = None) -> str:
    """Validate a single booking field; unknown paths have no rule and pass."""
    check = BOOKING_CHECKS.get(path)
    return check(draft, today) if check else ""


def validate_booking(draft: BookingDraft, today: date | None = None) -> tuple[ValidationErrors, bool]:
    """Validate the whole booking draft. Returns (errors, is_valid)."""
    if today is None:
        today = date.today()
    errors = ValidationErrors()
    for path in BOOKING_CHECKS:
        errors.set(path, validate_booking_field(draft, path, today))
    return errors, not errors


CONTACT_CHECKS: dict[str, Callable[[ContactCreate], str]] = {
    "name": lambda d: required(d.name, "Name"),
    "email": lambda d: validate_email(d.email),
    "subject": lambda d: required(d.subject, "Subject"),
    "message": lambda d: validate_message(d.message),
}


def validate_message(value: str) -> str:
    msg = required(value, "Message")
    if msg:
        return msg
    if len(value.strip()) < MIN_MESSAGE_LENGTH:
        return f"Message must be at least {MIN_MESSAGE_LENGTH} characters long"
    return ""


def validate_contact_field(draft: ContactCreate, path: str) -> str:
    check = CONTACT_CHECKS.get(path)
    return check(draft) if check else ""


def validate_contact(draft: ContactCreate) -> tuple[ValidationErrors, bool]:
    errors = ValidationErrors()
    for path in CONTACT_CHECKS:
        errors.set(path, validate_contact_field(draft, path))
    return errors, not errors
