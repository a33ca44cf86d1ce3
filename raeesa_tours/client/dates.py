"""Date entry helpers for the booking form.

Dates are typed as ``DD/MM/YYYY``. :func:`format_date_input` turns raw
keystrokes into that shape and :func:`validate_date` judges the result.
"""
import re
from datetime import date
from typing import Literal

from raeesa_tours.core.dates import is_date_shaped, parse_display_date

DateRole = Literal["Departure", "Return"]

_NON_DIGITS = re.compile(r"\D")

MAX_DIGITS = 8  # DDMMYYYY


def format_date_input(value: str) -> str:
    """Strip non-digits and re-insert slashes after the day and month groups."""
    digits = _NON_DIGITS.sub("", value or "")[:MAX_DIGITS]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def validate_date(value: str, role: DateRole, departure: str = "", today: date | None = None) -> str:
    """Return the error message for ``value`` or ``""`` when it is acceptable.

    ``departure`` is the current departure date string; it only matters when
    ``role`` is ``"Return"``.
    """
    if not value:
        return f"{role} date is required"

    if not is_date_shaped(value):
        return "Please enter date in DD/MM/YYYY format"

    candidate = parse_display_date(value)
    if candidate is None:
        return "Please enter a valid date"

    if today is None:
        today = date.today()

    if role == "Departure" and candidate < today:
        return "Departure date must be in the future"

    if role == "Return" and is_date_shaped(departure):
        departure_on = parse_display_date(departure)
        # an impossible departure (31/02) is reported on its own field
        if departure_on is not None and candidate <= departure_on:
            return "Return date must be after departure date"

    return ""
