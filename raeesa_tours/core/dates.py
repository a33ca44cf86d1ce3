"""Date parsing shared by the form controllers and the API filters."""
import re
from datetime import date, datetime
from typing import Optional

DISPLAY_FORMAT = "%d/%m/%Y"
DATE_FORMAT_RE = re.compile(r"(0[1-9]|[12]\d|3[01])/(0[1-9]|1[0-2])/\d{4}")
ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def is_date_shaped(value: str) -> bool:
    return bool(value) and DATE_FORMAT_RE.fullmatch(value) is not None


def parse_display_date(value: str) -> Optional[date]:
    """``DD/MM/YYYY`` -> date, or None when the string is malformed or not a real day."""
    if not is_date_shaped(value):
        return None
    day, month, year = (int(p) for p in value.split("/"))
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_date(value: str | None) -> Optional[date]:
    """Accept ``DD/MM/YYYY``, ISO ``YYYY-MM-DD`` or a full ISO timestamp.

    The whole string must parse; trailing text is rejected.
    """
    if not value:
        return None
    value = value.strip()
    parsed = parse_display_date(value)
    if parsed is not None:
        return parsed
    try:
        if ISO_DATE_RE.fullmatch(value):
            return date.fromisoformat(value)
        if ISO_DATE_RE.match(value) and value[10:11] == "T":
            # browsers send Date#toISOString() with a trailing Z
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None
    return None
