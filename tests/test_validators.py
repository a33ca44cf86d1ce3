from datetime import date, timedelta

import pytest

from raeesa_tours.client.errors import ValidationErrors
from raeesa_tours.client.validators import (
    BOOKING_CHECKS,
    validate_booking,
    validate_booking_field,
    validate_contact,
    validate_email,
    validate_phone,
)
from raeesa_tours.schemas.contact import ContactCreate
from raeesa_tours.schemas.registration import BookingDraft


def test_empty_draft_reports_every_required_field():
    errors, ok = validate_booking(BookingDraft())
    assert ok is False
    flat = errors.as_dict()
    assert flat == {
        "firstName": "First name is required",
        "lastName": "Last name is required",
        "email": "Email is required",
        "phone": "Phone number is required",
        "destination": "Please select a destination",
        "departureDate": "Departure date is required",
        "returnDate": "Return date is required",
        "emergencyContact.name": "Emergency contact name is required",
        "emergencyContact.phone": "Emergency contact phone is required",
        "emergencyContact.relation": "Relation is required",
        "streetAddress": "Street address is required",
        "city": "City is required",
        "stateProvince": "State/Province is required",
        "postalCode": "Postal code is required",
        "country": "Country is required",
    }
    assert errors.emergency_contact.relation == "Relation is required"


def test_sample_draft_is_valid(valid_draft):
    errors, ok = validate_booking(valid_draft)
    assert ok is True
    assert errors.as_dict() == {}
    assert not errors


def test_validation_does_not_mutate_and_is_idempotent(valid_draft):
    valid_draft.email = "broken"
    before = valid_draft.model_dump()
    first, _ = validate_booking(valid_draft, today=date(2026, 1, 1))
    second, _ = validate_booking(valid_draft, today=date(2026, 1, 1))
    assert first == second
    assert valid_draft.model_dump() == before


def test_whitespace_only_counts_as_missing(valid_draft):
    valid_draft.city = "   "
    errors, ok = validate_booking(valid_draft)
    assert not ok
    assert errors.get("city") == "City is required"


def test_short_names(valid_draft):
    valid_draft.firstName = "A"
    valid_draft.lastName = " B "
    errors, _ = validate_booking(valid_draft)
    assert errors.get("firstName") == "First name must be at least 2 characters"
    assert errors.get("lastName") == "Last name must be at least 2 characters"


@pytest.mark.parametrize("value", ["a@b.com", "first.last@mail.example.in"])
def test_email_ok(value):
    assert validate_email(value) == ""


@pytest.mark.parametrize("value", ["ab.com", "a@b", "a b@c.com", "a@@b.com", "@b.com"])
def test_email_bad_format(value):
    assert validate_email(value) == "Please enter a valid email address"


@pytest.mark.parametrize("value", ["+91 7006276358", "7006276358", "700-627-6358", "+1 555 123 4567"])
def test_phone_ok(value):
    assert validate_phone(value) == ""


@pytest.mark.parametrize("value", ["12345", "+91 70062", "phone 7006276358", "7006276358x"])
def test_phone_bad_format(value):
    assert validate_phone(value) == "Please enter a valid phone number"


def test_emergency_phone_errors_use_nested_path(valid_draft):
    valid_draft.emergencyContact.phone = "123"
    errors, ok = validate_booking(valid_draft)
    assert not ok
    assert errors.get("emergencyContact.phone") == "Please enter a valid phone number"
    assert errors.emergency_contact.phone == "Please enter a valid phone number"
    assert errors.as_dict() == {"emergencyContact.phone": "Please enter a valid phone number"}


def test_unknown_destination(valid_draft):
    valid_draft.destination = "Atlantis"
    errors, _ = validate_booking(valid_draft)
    assert errors.get("destination") == "Please select a destination"


@pytest.mark.parametrize("adults, children, field, message", [
    ("0", "0", "adults", "Adults must be at least 1"),
    ("two", "0", "adults", "Adults must be at least 1"),
    ("1", "-1", "children", "Children cannot be negative"),
])
def test_traveller_counts(valid_draft, adults, children, field, message):
    valid_draft.adults = adults
    valid_draft.children = children
    errors, ok = validate_booking(valid_draft)
    assert not ok
    assert errors.get(field) == message


def test_return_must_follow_departure(valid_draft):
    valid_draft.returnDate = valid_draft.departureDate
    errors, ok = validate_booking(valid_draft)
    assert not ok
    assert errors.get("returnDate") == "Return date must be after departure date"


def test_past_departure_rejected_on_submit(valid_draft):
    yesterday = date.today() - timedelta(days=1)
    valid_draft.departureDate = yesterday.strftime("%d/%m/%Y")
    errors, _ = validate_booking(valid_draft)
    assert errors.get("departureDate") == "Departure date must be in the future"


def test_single_field_agrees_with_full_validation(valid_draft):
    valid_draft.email = "nope"
    valid_draft.returnDate = "31/02/2030"
    valid_draft.emergencyContact.relation = ""
    today = date.today()
    full, _ = validate_booking(valid_draft, today=today)
    for path in BOOKING_CHECKS:
        assert validate_booking_field(valid_draft, path, today) == full.get(path), path


def test_contact_validation():
    errors, ok = validate_contact(ContactCreate(name="", email="x", subject=" ", message="too short"))
    assert not ok
    assert errors.as_dict() == {
        "name": "Name is required",
        "email": "Please enter a valid email address",
        "subject": "Subject is required",
        "message": "Message must be at least 10 characters long",
    }
    _, ok = validate_contact(ContactCreate(name="Zoya", email="z@x.com", subject="Houseboat", message="Is May a good month?"))
    assert ok


def test_validation_errors_paths():
    errors = ValidationErrors()
    errors.set("emergencyContact.name", "Emergency contact name is required")
    errors.set("city", "City is required")
    assert len(errors) == 2
    errors.clear("emergencyContact.name")
    assert errors.as_dict() == {"city": "City is required"}
    with pytest.raises(KeyError):
        errors.set("emergencyContact.nmae", "typo")
    with pytest.raises(KeyError):
        errors.get("address.city")


@pytest.mark.parametrize("room_type", ["standard", "deluxe", "suite", "houseboat"])
def test_known_room_types_pass(valid_draft, room_type):
    valid_draft.roomType = room_type
    assert validate_booking_field(valid_draft, "roomType") == ""


def test_unknown_meal_preference(valid_draft):
    valid_draft.mealPreference = "carnivore"
    errors, ok = validate_booking(valid_draft)
    assert not ok
    assert errors.as_dict() == {"mealPreference": "Please select a meal preference"}
