from datetime import date

from raeesa_tours.client.dates import format_date_input, validate_date
from raeesa_tours.client.errors import EMERGENCY_CONTACT, ValidationErrors
from raeesa_tours.client.validators import (
    validate_booking,
    validate_booking_field,
    validate_contact,
    validate_contact_field,
)
from raeesa_tours.schemas.contact import ContactCreate
from raeesa_tours.schemas.registration import BookingDraft

DATE_FIELDS = {"departureDate": "Departure", "returnDate": "Return"}
CHECKBOX_FIELDS = {"termsAccepted"}
# number inputs; the draft keeps them as strings like the wire format
COUNT_FIELDS = {"adults", "children"}


class FormState:
    """Draft, field errors and the single banner message of one form instance."""

    def __init__(self):
        self.errors = ValidationErrors()
        self.success_message = ""
        self.error_message = ""

    def set_success(self, message: str) -> None:
        self.success_message = message
        self.error_message = ""

    def set_error(self, message: str) -> None:
        self.error_message = message
        self.success_message = ""

    def clear_messages(self) -> None:
        self.success_message = ""
        self.error_message = ""

    @property
    def banner(self) -> tuple[str, str] | None:
        if self.success_message:
            return ("success", self.success_message)
        if self.error_message:
            return ("error", self.error_message)
        return None


class BookingFormState(FormState):
    """Single source of truth for the booking draft and its field errors.

    ``today`` pins the reference day for date checks; by default the current
    day is used at each check.
    """

    def __init__(self, destination: str = "", today: date | None = None):
        super().__init__()
        self.today = today
        self.draft = BookingDraft(destination=destination)

    def _today(self) -> date:
        return self.today or date.today()

    def change(self, name: str, value) -> None:
        """Apply one field change coming from the UI."""
        self.errors.clear(name)

        if "." in name:
            parent, child = name.split(".", 1)
            if parent != EMERGENCY_CONTACT or child not in type(self.draft.emergencyContact).model_fields:
                raise KeyError(name)
            setattr(self.draft.emergencyContact, child, value)
            return

        if name not in BookingDraft.model_fields:
            raise KeyError(name)

        if name in DATE_FIELDS:
            self._change_date(name, value)
        elif name in CHECKBOX_FIELDS:
            setattr(self.draft, name, bool(value))
        elif name in COUNT_FIELDS:
            setattr(self.draft, name, "" if value is None else str(value))
        else:
            setattr(self.draft, name, value)

    def _change_date(self, name: str, value: str) -> None:
        formatted = format_date_input(value)
        setattr(self.draft, name, formatted)
        self.errors.set(name, validate_date(
            formatted, DATE_FIELDS[name], departure=self.draft.departureDate, today=self._today()))

        # a new departure can invalidate (or fix) an already entered return date
        if name == "departureDate" and self.draft.returnDate:
            self.errors.set("returnDate", validate_date(
                self.draft.returnDate, "Return", departure=formatted, today=self._today()))

    def validate_field(self, name: str) -> str:
        msg = validate_booking_field(self.draft, name, self._today())
        self.errors.set(name, msg)
        return msg

    def validate(self) -> bool:
        self.errors, ok = validate_booking(self.draft, self._today())
        return ok

    def payload(self) -> dict:
        return self.draft.model_dump()

    def reset(self) -> None:
        self.draft = BookingDraft()
        self.errors = ValidationErrors()
        self.clear_messages()


class ContactFormState(FormState):
    def __init__(self):
        super().__init__()
        self.draft = ContactCreate()

    def change(self, name: str, value: str) -> None:
        if name not in ContactCreate.model_fields:
            raise KeyError(name)
        setattr(self.draft, name, value)
        self.errors.clear(name)

    def validate_field(self, name: str) -> str:
        msg = validate_contact_field(self.draft, name)
        self.errors.set(name, msg)
        return msg

    def validate(self) -> bool:
        self.errors, ok = validate_contact(self.draft)
        return ok

    def payload(self) -> dict:
        return self.draft.model_dump()

    def reset(self) -> None:
        self.draft = ContactCreate()
        self.errors = ValidationErrors()
        self.clear_messages()
